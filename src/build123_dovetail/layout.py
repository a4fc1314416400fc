from __future__ import annotations

import logging
from dataclasses import dataclass

from build123d import Location

from build123_dovetail.dimensions import DerivedDimensions
from build123_dovetail.params import INCH, BoardLayout, JointParameters
from build123_dovetail.profiles import ToothKind

logger = logging.getLogger(__name__)

# Gap between the boards when they are laid out side by side
APART_GAP: float = 3 * INCH


@dataclass(frozen=True)
class ToothPlacement:
    kind: ToothKind
    index: int
    offset: float


@dataclass(frozen=True)
class ToothLayout:
    """Distributes teeth along the board width at a fixed pitch.

    ``start_offset`` is where the first tooth's profile origin lands.
    """
    kind: ToothKind
    start_offset: float
    pitch: float
    count: int

    def positions(self) -> list[float]:
        if self.count < 1:
            return []
        return [self.start_offset + i * self.pitch for i in range(self.count)]

    def placements(self) -> list[ToothPlacement]:
        return [
            ToothPlacement(kind=self.kind, index=i, offset=pos)
            for i, pos in enumerate(self.positions())
        ]


def tail_layout(dims: DerivedDimensions, tooth_count: int | None = None) -> ToothLayout:
    # A narrow pin's width of margin before the first tail
    return ToothLayout(
        kind=ToothKind.TAIL,
        start_offset=dims.pin_width_narrow,
        pitch=dims.pitch,
        count=dims.tooth_count if tooth_count is None else tooth_count,
    )


def pin_layout(dims: DerivedDimensions, tooth_count: int | None = None) -> ToothLayout:
    # One more pin than tails; pulled back by the overlap so the narrow end of
    # the outer pins sits flush with the board edges
    count = dims.tooth_count if tooth_count is None else tooth_count
    return ToothLayout(
        kind=ToothKind.PIN,
        start_offset=-dims.overlap_width,
        pitch=dims.pitch,
        count=count + 1,
    )


def place_tails(dims: DerivedDimensions, tooth_count: int | None = None) -> list[ToothPlacement]:
    placements = tail_layout(dims, tooth_count).placements()
    logger.debug("Tails at %s", [round(p.offset, 3) for p in placements])
    return placements


def place_pins(dims: DerivedDimensions, tooth_count: int | None = None) -> list[ToothPlacement]:
    placements = pin_layout(dims, tooth_count).placements()
    logger.debug("Pins at %s", [round(p.offset, 3) for p in placements])
    return placements


def board_relocation(params: JointParameters, dims: DerivedDimensions) -> Location:
    """Where the pin pattern (the tails board and its cutters) goes in the world.

    ASSEMBLED: rotate 90° about X so the board stands up on the end of the pins
    board, its thickness across the sockets and its length along +Z. Its local
    z=0 face lands on the sockets' baseline (world y=T), and it is shifted back
    by the overlap so its tails register in the tail sockets. The tails board
    therefore spans x in [-overlap, W - overlap]: it overhangs the pins board
    by one overlap width on the x=0 edge and falls short by the same amount
    on the far edge.

    APART: slide it along X, clear of the pins board.

    Only the display position changes; the cut geometry is the same either way.
    """
    if params.board_layout is BoardLayout.ASSEMBLED:
        return Location((-dims.overlap_width, dims.stock_thickness, 0), (90, 0, 0))
    return Location((params.stock_width + APART_GAP, 0, 0))

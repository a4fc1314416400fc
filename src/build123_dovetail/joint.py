from __future__ import annotations

import logging
from dataclasses import dataclass, field

from build123d import Part

from build123_dovetail.boards import PINS_COLOR, TAILS_COLOR, Board
from build123_dovetail.dimensions import DerivedDimensions, derive_dimensions
from build123_dovetail.kernel import DEFAULT_KERNEL, GeometryKernel
from build123_dovetail.layout import (
    ToothPlacement,
    board_relocation,
    place_pins,
    place_tails,
)
from build123_dovetail.params import CUTTER_EXTEND, JointParameters
from build123_dovetail.profiles import build_pin_profile, build_tail_profile, profile_solid

logger = logging.getLogger(__name__)


def tail_cutter_array(
    dims: DerivedDimensions,
    placements: list[ToothPlacement],
    kernel: GeometryKernel = DEFAULT_KERNEL,
    extend: float = CUTTER_EXTEND,
) -> Part:
    """Union of the tail cutters, in the pins board's local frame."""
    profile = build_tail_profile(dims, as_cutter=True, extend=extend)
    return kernel.union([profile_solid(profile, dims, p.offset, kernel) for p in placements])


def pin_cutter_array(
    dims: DerivedDimensions,
    placements: list[ToothPlacement],
    kernel: GeometryKernel = DEFAULT_KERNEL,
    extend: float = CUTTER_EXTEND,
    mirrored: bool = True,
) -> Part:
    """Union of the pin cutters, in the tails board's local frame.

    The pins stand up out of the pins board's face; cutting the tails board
    they have to point the other way, so the array is mirrored through the
    mid-thickness plane unless ``mirrored`` is False.
    """
    profile = build_pin_profile(dims, as_cutter=True, extend=extend)
    cutters = kernel.union([profile_solid(profile, dims, p.offset, kernel) for p in placements])
    if mirrored:
        return kernel.mirror(cutters, dims.stock_thickness / 2)
    return cutters


@dataclass
class DovetailJoint:
    """Through dovetail between a pins board and a tails board.

    The pins board is cut by the tail cutters, leaving pins standing between
    the sockets. The tails board is cut by the (mirrored) pin cutters and is
    relocated next to, or into, the pins board according to
    ``params.board_layout``.
    """

    params: JointParameters = field(default_factory=JointParameters)
    kernel: GeometryKernel = field(default=DEFAULT_KERNEL, repr=False)
    dims: DerivedDimensions = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.dims = derive_dimensions(self.params)

    def _make_board(self, name: str, color) -> Board:
        return Board(
            width=self.params.stock_width,
            length=self.params.stock_length,
            thickness=self.params.stock_thickness,
            name=name,
            color=color,
            kernel=self.kernel,
        )

    def get_pins_feature(self) -> Part:
        return tail_cutter_array(
            self.dims, place_tails(self.dims), self.kernel, self.params.cutter_extend
        )

    def get_tails_feature(self) -> Part:
        return pin_cutter_array(
            self.dims, place_pins(self.dims), self.kernel, self.params.cutter_extend
        )

    def build_pins_board(self) -> Board:
        board = self._make_board("pins", PINS_COLOR)
        board.add_feature(self.get_pins_feature())
        return board

    def build_tails_board(self) -> Board:
        board = self._make_board("tails", TAILS_COLOR)
        board.location = board_relocation(self.params, self.dims)
        board.add_feature(self.get_tails_feature())
        return board

    def apply(self) -> tuple[Board, Board]:
        pins = self.build_pins_board()
        tails = self.build_tails_board()
        logger.debug("Built %r and %r (%s)", pins, tails, self.params.board_layout.name.lower())
        return (pins, tails)

    def __repr__(self) -> str:
        return f"DovetailJoint({self.params!r})"


def build_pins_board(params: JointParameters, kernel: GeometryKernel = DEFAULT_KERNEL) -> Board:
    """Stock block minus the tail cutters."""
    return DovetailJoint(params, kernel).build_pins_board()


def build_tails_board(params: JointParameters, kernel: GeometryKernel = DEFAULT_KERNEL) -> Board:
    """Relocated stock block minus the mirrored pin cutters."""
    return DovetailJoint(params, kernel).build_tails_board()

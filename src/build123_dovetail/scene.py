from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from build123d import Compound

from build123_dovetail.boards import Board
from build123_dovetail.joint import DovetailJoint
from build123_dovetail.kernel import DEFAULT_KERNEL, GeometryKernel
from build123_dovetail.params import DisplayMode, JointParameters

logger = logging.getLogger(__name__)


def select_boards(mode: DisplayMode | str, pins: Board, tails: Board) -> list[Board]:
    """Boards to emit for a display mode. Unknown modes raise UnknownDisplayMode."""
    mode = DisplayMode.parse(mode)
    if mode is DisplayMode.ALL:
        return [pins, tails]
    if mode is DisplayMode.PINS:
        return [pins]
    return [tails]


@dataclass
class DovetailScene:
    name: str = "DovetailJoint"
    boards: list[Board] = field(default_factory=list)

    def add_board(self, board: Board) -> None:
        self.boards.append(board)

    def get_compound(self) -> Compound:
        return Compound([b.global_shape for b in self.boards])

    def get_blanks_compound(self) -> Compound:
        return Compound([b.blank.moved(b.location) for b in self.boards])

    def find_by_name(self, name: str) -> list[Board]:
        return [b for b in self.boards if b.name == name]

    def __iter__(self) -> Iterator[Board]:
        return iter(self.boards)

    def __len__(self) -> int:
        return len(self.boards)

    def __repr__(self) -> str:
        return f"DovetailScene('{self.name}', boards={[b.name for b in self.boards]})"


def build_scene(
    params: JointParameters,
    mode: DisplayMode | str | None = None,
    kernel: GeometryKernel = DEFAULT_KERNEL,
) -> DovetailScene:
    """Build both boards and keep the ones the display mode asks for.

    ``mode`` defaults to ``params.display_mode``.
    """
    mode = DisplayMode.parse(params.display_mode if mode is None else mode)
    pins, tails = DovetailJoint(params, kernel).apply()
    scene = DovetailScene()
    for board in select_boards(mode, pins, tails):
        scene.add_board(board)
    logger.info("Scene %s: %s", mode.name.lower(), [b.name for b in scene])
    return scene

"""Central configuration for dovetail joints.

All lengths are millimetres. Defaults describe a 3/4" x 3 1/2" board with
five tails, 1/8" narrow pins and an 8:1 dovetail slope.

The parameters are immutable and threaded explicitly through every step of
the joint construction, so several joint sizes can be generated side by side
in one process.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum, auto

from build123_dovetail.errors import UnknownBoardLayout, UnknownDisplayMode


# =============================================================================
# Units and master defaults
# =============================================================================

INCH: float = 25.4  # mm

# 8:1 slope, the usual hardwood dovetail ratio
DEFAULT_CUT_ANGLE: float = math.degrees(math.atan(8))

# How far cutter solids overshoot the faces they open onto. Keeps the boolean
# kernel away from coincident faces; tune it against the kernel in use.
CUTTER_EXTEND: float = 0.01  # mm


class DisplayMode(Enum):
    ALL = auto()
    PINS = auto()
    TAILS = auto()

    @classmethod
    def parse(cls, value: DisplayMode | str) -> DisplayMode:
        """Accept a member or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        choices = ", ".join(m.name.lower() for m in cls)
        raise UnknownDisplayMode(f"Unknown display mode {value!r}. Use one of: {choices}")


class BoardLayout(Enum):
    APART = auto()  # boards side by side
    ASSEMBLED = auto()  # tails board stands in the pins board's sockets

    @classmethod
    def parse(cls, value: BoardLayout | bool | str) -> BoardLayout:
        """Accept a member, a stock-intersect flag or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ASSEMBLED if value else cls.APART
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        choices = ", ".join(m.name.lower() for m in cls)
        raise UnknownBoardLayout(f"Unknown board layout {value!r}. Use one of: {choices}")


@dataclass(frozen=True)
class JointParameters:
    """Independent inputs of a through dovetail joint.

    Both boards share the same stock. The tails are tiled along ``stock_width``;
    ``stock_length`` only sets how far each board extends away from the joint.
    """

    stock_thickness: float = 0.75 * INCH
    stock_width: float = 3.5 * INCH
    stock_length: float = 6 * INCH
    tooth_count: int = 5
    narrow_pin_width: float = 0.125 * INCH
    cut_angle: float = DEFAULT_CUT_ANGLE
    cutter_extend: float = CUTTER_EXTEND
    display_mode: DisplayMode = DisplayMode.ALL
    board_layout: BoardLayout = BoardLayout.APART

    def __post_init__(self) -> None:
        # Normalise string selectors coming from loosely typed callers
        if not isinstance(self.display_mode, DisplayMode):
            object.__setattr__(self, "display_mode", DisplayMode.parse(self.display_mode))
        if not isinstance(self.board_layout, BoardLayout):
            object.__setattr__(self, "board_layout", BoardLayout.parse(self.board_layout))

    @property
    def stock_intersect(self) -> bool:
        return self.board_layout is BoardLayout.ASSEMBLED

    @property
    def cut_angle_radians(self) -> float:
        return math.radians(self.cut_angle)

    def replace(self, **overrides) -> JointParameters:
        return dataclasses.replace(self, **overrides)

    def __repr__(self) -> str:
        return (
            f"JointParameters(T={self.stock_thickness}, W={self.stock_width}, "
            f"L={self.stock_length}, teeth={self.tooth_count}, "
            f"pin={self.narrow_pin_width}, angle={self.cut_angle:.2f}°, "
            f"{self.display_mode.name.lower()}, {self.board_layout.name.lower()})"
        )


# Global default parameters instance
DEFAULT_PARAMETERS = JointParameters()


def get_parameters(**overrides) -> JointParameters:
    """Get joint parameters, optionally with some fields overridden.

    Args:
        **overrides: Any ``JointParameters`` field

    Returns:
        ``DEFAULT_PARAMETERS`` when nothing is overridden, otherwise a copy
    """
    if not overrides:
        return DEFAULT_PARAMETERS
    return DEFAULT_PARAMETERS.replace(**overrides)

from build123_dovetail.errors import (
    DovetailError,
    InvalidJointGeometry,
    UnknownBoardLayout,
    UnknownDisplayMode,
)
from build123_dovetail.params import (
    INCH,
    BoardLayout,
    DisplayMode,
    JointParameters,
    DEFAULT_PARAMETERS,
    get_parameters,
)
from build123_dovetail.dimensions import (
    DerivedDimensions,
    solve_dimensions,
    validate_dimensions,
    derive_dimensions,
)
from build123_dovetail.kernel import GeometryKernel, Build123dKernel
from build123_dovetail.profiles import (
    ToothKind,
    ToothProfile,
    build_pin_profile,
    build_tail_profile,
    profile_solid,
)
from build123_dovetail.layout import (
    ToothLayout,
    ToothPlacement,
    place_pins,
    place_tails,
    board_relocation,
)
from build123_dovetail.boards import Board
from build123_dovetail.joint import (
    DovetailJoint,
    build_pins_board,
    build_tails_board,
    pin_cutter_array,
    tail_cutter_array,
)
from build123_dovetail.scene import DovetailScene, build_scene, select_boards

__version__ = "0.1.0"

__all__ = [
    "DovetailError",
    "InvalidJointGeometry",
    "UnknownBoardLayout",
    "UnknownDisplayMode",
    "INCH",
    "BoardLayout",
    "DisplayMode",
    "JointParameters",
    "DEFAULT_PARAMETERS",
    "get_parameters",
    "DerivedDimensions",
    "solve_dimensions",
    "validate_dimensions",
    "derive_dimensions",
    "GeometryKernel",
    "Build123dKernel",
    "ToothKind",
    "ToothProfile",
    "build_pin_profile",
    "build_tail_profile",
    "profile_solid",
    "ToothLayout",
    "ToothPlacement",
    "place_pins",
    "place_tails",
    "board_relocation",
    "Board",
    "DovetailJoint",
    "build_pins_board",
    "build_tails_board",
    "pin_cutter_array",
    "tail_cutter_array",
    "DovetailScene",
    "build_scene",
    "select_boards",
]

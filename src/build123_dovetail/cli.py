"""Command-line front end: override joint parameters and export the boards."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from build123d import Compound, export_step, export_stl

from build123_dovetail.dimensions import derive_dimensions
from build123_dovetail.errors import DovetailError
from build123_dovetail.layout import place_pins, place_tails
from build123_dovetail.params import (
    INCH,
    BoardLayout,
    DisplayMode,
    JointParameters,
    get_parameters,
)
from build123_dovetail.scene import build_scene

logger = logging.getLogger(__name__)

EXPORT_SUFFIXES = (".step", ".stp", ".stl")
LENGTH_OPTIONS = ("stock_thickness", "stock_width", "stock_length", "narrow_pin_width")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="build123-dovetail",
        description="Generate the pins and tails boards of a through dovetail joint.",
    )
    p.add_argument("--stock-thickness", type=float, help="Board thickness.")
    p.add_argument("--stock-width", type=float, help="Board width, the edge the teeth are tiled along.")
    p.add_argument("--stock-length", type=float, help="Board length (cosmetic).")
    p.add_argument("--tooth-count", type=int, help="Number of tails.")
    p.add_argument("--narrow-pin-width", type=float, help="Width of a pin at its narrow end.")
    p.add_argument("--cut-angle", type=float, help="Dovetail angle in degrees (default: 8:1 slope).")
    p.add_argument("--cutter-extend", type=float, help="Cutter overshoot past open faces (mm).")
    p.add_argument("--inches", action="store_true", help="Lengths are given in inches instead of mm.")
    p.add_argument(
        "--display",
        type=str,
        default=DisplayMode.ALL.name.lower(),
        help="Which boards to emit: all, pins or tails.",
    )
    p.add_argument(
        "--stock-intersect",
        action="store_true",
        help="Place the tails board in the pins board's sockets instead of beside it.",
    )
    p.add_argument("-o", "--output", type=Path, help="Export to .step/.stp or .stl.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def parameters_from_args(args: argparse.Namespace) -> JointParameters:
    overrides = {}
    for name in LENGTH_OPTIONS + ("tooth_count", "cut_angle", "cutter_extend"):
        value = getattr(args, name)
        if value is None:
            continue
        if args.inches and name in LENGTH_OPTIONS:
            value *= INCH
        overrides[name] = value
    overrides["display_mode"] = DisplayMode.parse(args.display)
    if args.stock_intersect:
        overrides["board_layout"] = BoardLayout.ASSEMBLED
    return get_parameters(**overrides)


def export_scene(compound: Compound, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix in (".step", ".stp"):
        export_step(compound, str(path))
    elif suffix == ".stl":
        export_stl(compound, str(path))
    else:
        raise ValueError(f"Unsupported export format '{suffix}'. Use .step, .stp or .stl")
    logger.info("Wrote %s", path)


def summary(params: JointParameters) -> str:
    dims = derive_dimensions(params)
    lines = [
        f"{params!r}",
        f"  pins:    {dims.pin_width_narrow:.3f} → {dims.pin_width_wide:.3f} mm",
        f"  tails:   {dims.tail_width_narrow:.3f} → {dims.tail_width_wide:.3f} mm",
        f"  overlap: {dims.overlap_width:.3f} mm",
        "  tails at " + ", ".join(f"{p.offset:.3f}" for p in place_tails(dims)),
        "  pins at  " + ", ".join(f"{p.offset:.3f}" for p in place_pins(dims)),
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.output is not None and args.output.suffix.lower() not in EXPORT_SUFFIXES:
        parser.error(f"--output must end in one of {', '.join(EXPORT_SUFFIXES)}")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = parameters_from_args(args)
        print(summary(params))
        if args.output is not None:
            scene = build_scene(params)
            export_scene(scene.get_compound(), args.output)
    except DovetailError as e:
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

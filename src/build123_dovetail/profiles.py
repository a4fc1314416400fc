"""Cross-section profiles of a single pin and a single tail.

Profiles are 2D trapezoids in ``(x, d)`` where ``x`` runs along the board width
and ``d`` runs across the mating board's thickness, from 0 to ``T``:

    tail (narrow at d=0)          pin (wide at d=0)

     d=T  +--------------+         d=T     +----+
           \\            /                /      \\
     d=0    +----------+          d=0   +----------+

A cutter profile is the same trapezoid with its open edges pushed out by a
small epsilon along the slanted sides, so the sides (the mating faces) stay on
exactly the same lines as the exact profile.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from build123d import Part

from build123_dovetail.dimensions import DerivedDimensions
from build123_dovetail.kernel import DEFAULT_KERNEL, GeometryKernel, Point2D
from build123_dovetail.params import CUTTER_EXTEND


class ToothKind(Enum):
    PIN = auto()
    TAIL = auto()


@dataclass(frozen=True)
class ToothProfile:
    """Four corners of a tooth, counter-clockwise from the d=0 left corner."""

    kind: ToothKind
    points: tuple[Point2D, Point2D, Point2D, Point2D]
    cutter: bool = False
    extend: float = 0.0

    def edges_at(self, d: float) -> tuple[float, float]:
        """Left and right x of the slanted sides at depth ``d``."""
        (x0l, d0), (x0r, _), (x1r, d1), (x1l, _) = self.points
        t = (d - d0) / (d1 - d0)
        return (x0l + (x1l - x0l) * t, x0r + (x1r - x0r) * t)

    def width_at(self, d: float) -> float:
        left, right = self.edges_at(d)
        return right - left

    @property
    def d_range(self) -> tuple[float, float]:
        return (self.points[0][1], self.points[2][1])

    def __repr__(self) -> str:
        variant = "cutter" if self.cutter else "exact"
        corners = ", ".join(f"({x:.3f}, {d:.3f})" for x, d in self.points)
        return f"ToothProfile({self.kind.name.lower()}, {variant}, [{corners}])"


def _extend_along_sides(
    points: tuple[Point2D, Point2D, Point2D, Point2D],
    before: float,
    after: float,
) -> tuple[Point2D, Point2D, Point2D, Point2D]:
    # Slide the bottom edge down by `before` and the top edge up by `after`,
    # keeping every corner on its slanted side.
    (x0l, d0), (x0r, _), (x1r, d1), (x1l, _) = points
    span = d1 - d0
    slope_l = (x1l - x0l) / span
    slope_r = (x1r - x0r) / span
    return (
        (x0l - slope_l * before, d0 - before),
        (x0r - slope_r * before, d0 - before),
        (x1r + slope_r * after, d1 + after),
        (x1l + slope_l * after, d1 + after),
    )


def build_tail_profile(
    dims: DerivedDimensions,
    as_cutter: bool = False,
    extend: float = CUTTER_EXTEND,
) -> ToothProfile:
    """Tail trapezoid: narrow at d=0 (the board end), wide at d=T (the baseline).

    Only the d=0 edge is open, so a cutter extends it alone; the baseline is a
    mating face and stays put.
    """
    t = dims.stock_thickness
    narrow = dims.tail_width_narrow
    overlap = dims.overlap_width
    points = (
        (0.0, 0.0),
        (narrow, 0.0),
        (narrow + overlap, t),
        (-overlap, t),
    )
    if as_cutter:
        return ToothProfile(
            ToothKind.TAIL, _extend_along_sides(points, extend, 0.0), cutter=True, extend=extend
        )
    return ToothProfile(ToothKind.TAIL, points)


def build_pin_profile(
    dims: DerivedDimensions,
    as_cutter: bool = False,
    extend: float = CUTTER_EXTEND,
) -> ToothProfile:
    """Pin trapezoid: wide at d=0, narrow at d=T.

    Pins run through the whole thickness of the board they are cut from, so
    both the d=0 and d=T edges are board faces and a cutter extends both.
    """
    t = dims.stock_thickness
    overlap = dims.overlap_width
    points = (
        (0.0, 0.0),
        (dims.pin_width_wide, 0.0),
        (overlap + dims.pin_width_narrow, t),
        (overlap, t),
    )
    if as_cutter:
        return ToothProfile(
            ToothKind.PIN, _extend_along_sides(points, extend, extend), cutter=True, extend=extend
        )
    return ToothProfile(ToothKind.PIN, points)


def profile_solid(
    profile: ToothProfile,
    dims: DerivedDimensions,
    offset: float = 0.0,
    kernel: GeometryKernel = DEFAULT_KERNEL,
) -> Part:
    """Sweep a profile into the solid that cuts (or forms) one tooth.

    Both solids are in the local frame of the board they cut: X along the
    width, Y along the length away from the joint end, Z through the
    thickness. The cut depth is the mating board's thickness.

    - Tail: the (x, d) profile lies in XY (d along Y) and is extruded
      straight through the stock thickness along Z.
    - Pin: the profile is extruded along Z, then rotated 90° about X so the
      profile stands in the end-grain XZ plane (d along Z) and the extrusion
      runs along Y into the board.

    Cutters overshoot every open face by ``profile.extend``.
    """
    depth = dims.stock_thickness
    extend = profile.extend

    if profile.kind is ToothKind.TAIL:
        solid = kernel.extrude(profile.points, depth + 2 * extend)
        return kernel.transform(solid, translation=(offset, 0, -extend))

    # (x, y, z) -> (x, -z, y): d goes to Z, the sweep to -Y, then shift back
    # so the solid spans Y in [-extend, depth]
    solid = kernel.extrude(profile.points, depth + extend)
    return kernel.transform(solid, rotation=(90, 0, 0), translation=(offset, depth, 0))

"""Solid-modelling operations used to cut the boards.

The joint code only decides *which* solids to make and where to put them. The
operations themselves go through a ``GeometryKernel`` so the joint can be
built on any CSG backend; ``Build123dKernel`` is the default.
"""

from __future__ import annotations

from functools import reduce
from typing import Protocol, Sequence, runtime_checkable

from build123d import Align, Box, Location, Part, Plane, Polyline, extrude, make_face

Point2D = tuple[float, float]
Vector3 = tuple[float, float, float]


@runtime_checkable
class GeometryKernel(Protocol):
    """Protocol for CSG backends.

    Implementations must provide:
    - box(): an axis-aligned block with its min corner at the origin
    - extrude(): a closed XY polygon swept along +Z
    - transform(): rotate (degrees about X, Y, Z) then translate
    - mirror(): reflect through the plane z = ``z``
    - union() / subtract(): booleans
    """

    def box(self, length: float, width: float, height: float) -> Part:
        ...

    def extrude(self, points: Sequence[Point2D], height: float) -> Part:
        ...

    def transform(
        self,
        solid: Part,
        rotation: Vector3 = (0, 0, 0),
        translation: Vector3 = (0, 0, 0),
    ) -> Part:
        ...

    def mirror(self, solid: Part, z: float) -> Part:
        ...

    def union(self, solids: Sequence[Part]) -> Part:
        ...

    def subtract(self, solid: Part, cutter: Part) -> Part:
        ...


class Build123dKernel:
    """GeometryKernel backed by build123d / OpenCascade."""

    def box(self, length: float, width: float, height: float) -> Part:
        return Box(length, width, height, align=(Align.MIN, Align.MIN, Align.MIN))

    def extrude(self, points: Sequence[Point2D], height: float) -> Part:
        wire = Polyline(list(points), close=True)
        face = make_face(wire)
        solid = extrude(face, amount=height)
        return Part(solid.wrapped)

    def transform(
        self,
        solid: Part,
        rotation: Vector3 = (0, 0, 0),
        translation: Vector3 = (0, 0, 0),
    ) -> Part:
        return solid.moved(Location(translation, rotation))

    def mirror(self, solid: Part, z: float) -> Part:
        return solid.mirror(Plane.XY.offset(z))

    def union(self, solids: Sequence[Part]) -> Part:
        if not solids:
            raise ValueError("union() needs at least one solid")
        return reduce(lambda a, b: a + b, solids)

    def subtract(self, solid: Part, cutter: Part) -> Part:
        return solid - cutter

    def __repr__(self) -> str:
        return "Build123dKernel()"


DEFAULT_KERNEL = Build123dKernel()

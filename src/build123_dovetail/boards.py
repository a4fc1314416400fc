from __future__ import annotations

from dataclasses import dataclass, field

from build123d import Color, Location, Part

from build123_dovetail.kernel import DEFAULT_KERNEL, GeometryKernel

PINS_COLOR = Color(0.87, 0.72, 0.53)
TAILS_COLOR = Color(0.63, 0.32, 0.18)


@dataclass
class Board:
    """A board of rectangular stock with the joint cut into one end.

    Local coordinate system:
    - X: along the width (the edge the teeth are tiled along)
    - Y: along the length, away from the joint end
    - Z: through the thickness

    Origin at corner (0,0,0), board extends in positive X, Y, Z directions.
    """

    width: float
    length: float
    thickness: float
    name: str = ""
    color: Color | None = field(default=None, repr=False)
    location: Location = field(default_factory=Location)
    kernel: GeometryKernel = field(default=DEFAULT_KERNEL, repr=False)
    _features: list[Part] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        for dim, val in [("width", self.width), ("length", self.length), ("thickness", self.thickness)]:
            if val <= 0:
                raise ValueError(f"{dim} must be positive, got {val}")

    @property
    def volume(self) -> float:
        return self.width * self.length * self.thickness

    @property
    def blank(self) -> Part:
        return self.kernel.box(self.width, self.length, self.thickness)

    @property
    def features(self) -> list[Part]:
        return list(self._features)

    @property
    def shape(self) -> Part:
        result = self.blank
        for feature in self._features:
            result = self.kernel.subtract(result, feature)
        return result

    @property
    def global_shape(self) -> Part:
        shape = self.shape.moved(self.location)
        shape.label = self.name
        if self.color is not None:
            shape.color = self.color
        return shape

    def add_feature(self, feature: Part) -> None:
        self._features.append(feature)

    def clear_features(self) -> None:
        self._features.clear()

    def __repr__(self) -> str:
        name_str = f"'{self.name}' " if self.name else ""
        return f"Board({name_str}W={self.width}, L={self.length}, T={self.thickness})"

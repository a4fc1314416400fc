"""Closed-form dimensions of the pins and tails."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from build123_dovetail.errors import InvalidJointGeometry
from build123_dovetail.params import JointParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedDimensions:
    """Pin and tail widths derived from the joint parameters.

    Narrow/wide refer to the two ends of each trapezoidal tooth. The overlap is
    how far a tooth flares on each side across the mating board's thickness;
    it is shared by pins and tails, which is what makes them mate.
    """

    stock_thickness: float
    stock_width: float
    tooth_count: int
    pin_width_narrow: float
    pin_width_wide: float
    tail_width_narrow: float
    tail_width_wide: float
    overlap_width: float

    @property
    def pitch(self) -> float:
        """Distance between consecutive tails (or pins)."""
        return self.tail_width_wide + self.pin_width_narrow

    @property
    def tiled_width(self) -> float:
        """Width covered by the tooth array; equals the stock width."""
        return self.tooth_count * self.pitch + self.pin_width_narrow


def calculate_overlap(stock_thickness: float, cut_angle: float) -> float:
    """Sideways flare of a tooth across ``stock_thickness`` at ``cut_angle`` degrees."""
    return stock_thickness / math.tan(math.radians(cut_angle))


def solve_dimensions(params: JointParameters) -> DerivedDimensions:
    """Evaluate the joint equations. Degenerate inputs are not guarded here."""
    flare = 2 * calculate_overlap(params.stock_thickness, params.cut_angle)
    n = params.tooth_count

    pin_narrow = params.narrow_pin_width
    pin_wide = pin_narrow + flare
    tail_wide = (params.stock_width - pin_narrow * (n + 1)) / n
    tail_narrow = tail_wide - flare

    return DerivedDimensions(
        stock_thickness=params.stock_thickness,
        stock_width=params.stock_width,
        tooth_count=n,
        pin_width_narrow=pin_narrow,
        pin_width_wide=pin_wide,
        tail_width_narrow=tail_narrow,
        tail_width_wide=tail_wide,
        overlap_width=(tail_wide - tail_narrow) / 2,
    )


def validate_parameters(params: JointParameters) -> None:
    """Raise InvalidJointGeometry for inputs the solver cannot evaluate."""
    for dim, val in [
        ("stock_thickness", params.stock_thickness),
        ("stock_width", params.stock_width),
        ("stock_length", params.stock_length),
    ]:
        if val <= 0:
            raise InvalidJointGeometry(f"{dim} must be positive, got {val}")
    if isinstance(params.tooth_count, bool) or not isinstance(params.tooth_count, int):
        raise InvalidJointGeometry(
            f"tooth_count must be a whole number, got {params.tooth_count!r}"
        )
    if params.tooth_count < 1:
        raise InvalidJointGeometry(f"tooth_count must be at least 1, got {params.tooth_count}")
    if params.narrow_pin_width <= 0:
        raise InvalidJointGeometry(
            f"narrow_pin_width must be positive, got {params.narrow_pin_width}"
        )
    if not 0 < params.cut_angle < 90:
        raise InvalidJointGeometry(
            f"cut_angle must be between 0 and 90 degrees, got {params.cut_angle}"
        )
    if params.cutter_extend < 0:
        raise InvalidJointGeometry(
            f"cutter_extend must not be negative, got {params.cutter_extend}"
        )


def validate_dimensions(params: JointParameters, dims: DerivedDimensions) -> None:
    """Raise InvalidJointGeometry if the solved joint cannot be cut.

    The tail widths go non-positive when the pins are too wide or there are too
    many teeth for the stock width, or when the angle is too shallow for the
    stock thickness.
    """
    if dims.tail_width_wide <= 0:
        raise InvalidJointGeometry(
            f"No room for {params.tooth_count} tails: {params.tooth_count + 1} pins of "
            f"{params.narrow_pin_width} already use {params.stock_width} of stock width"
        )
    if dims.tail_width_narrow <= 0:
        raise InvalidJointGeometry(
            f"Tails would close up: wide end {dims.tail_width_wide:.3f} is less than "
            f"twice the overlap {dims.overlap_width:.3f} at {params.cut_angle:.2f}°"
        )


def derive_dimensions(params: JointParameters) -> DerivedDimensions:
    """Solve and validate. Every joint build goes through here once."""
    validate_parameters(params)
    dims = solve_dimensions(params)
    validate_dimensions(params, dims)
    logger.debug(
        "Dimensions: pins %.3f→%.3f, tails %.3f→%.3f, overlap %.3f",
        dims.pin_width_narrow,
        dims.pin_width_wide,
        dims.tail_width_narrow,
        dims.tail_width_wide,
        dims.overlap_width,
    )
    return dims

"""Volume, water volume, and surface area calculations.

All inputs are in inches. Functions are pure and total over numeric
input: nothing is validated, so zero and NaN propagate into the result
instead of raising.
"""

from __future__ import annotations

from pydantic import BaseModel

from tankctl.domain.types import OxygenExchange
from tankctl.domain.units import (
    CUBIC_CM_PER_LITER,
    DEFAULT_DISPLACEMENT,
    SQ_IN_PER_SQ_FT,
    gallons_to_liters,
    inches_to_cm,
    liters_to_gallons,
)

# Top surface area thresholds (ft²) for the gas exchange rating.
OXYGEN_LOW_BELOW = 2.0
OXYGEN_GOOD_BELOW = 4.0


class SurfaceArea(BaseModel):
    """Glass surface area (all six faces) and top (water surface) area."""

    model_config = {"frozen": True}

    total_sq_in: float
    total_sq_ft: float
    top_sq_in: float
    top_sq_ft: float


class VolumeInfo(BaseModel):
    """Volume metrics derived from one dimension triple."""

    model_config = {"frozen": True}

    geometric_liters: float
    geometric_gallons: float
    water_liters: float
    water_gallons: float
    surface_area: SurfaceArea


def volume(length: float, width: float, height: float) -> float:
    """Geometric volume in liters of a rectangular tank measured in inches."""
    length_cm = inches_to_cm(length)
    width_cm = inches_to_cm(width)
    height_cm = inches_to_cm(height)
    return length_cm * width_cm * height_cm / CUBIC_CM_PER_LITER


def to_gallons(liters: float) -> float:
    return liters_to_gallons(liters)


def to_liters(gallons: float) -> float:
    return gallons_to_liters(gallons)


def water_volume(geometric_liters: float, displacement: float = DEFAULT_DISPLACEMENT) -> float:
    """Volume left for water after substrate and decor take *displacement*."""
    return geometric_liters * (1 - displacement)


def surface_area(length: float, width: float, height: float) -> SurfaceArea:
    """Total and top surface area in square inches and square feet."""
    top = length * width
    total = 2 * (top + length * height + width * height)
    return SurfaceArea(
        total_sq_in=total,
        total_sq_ft=total / SQ_IN_PER_SQ_FT,
        top_sq_in=top,
        top_sq_ft=top / SQ_IN_PER_SQ_FT,
    )


def volume_info(
    length: float,
    width: float,
    height: float,
    displacement: float = DEFAULT_DISPLACEMENT,
) -> VolumeInfo:
    """Compute every volume metric for a triple in one pass."""
    liters = volume(length, width, height)
    water_liters = water_volume(liters, displacement)
    return VolumeInfo(
        geometric_liters=liters,
        geometric_gallons=to_gallons(liters),
        water_liters=water_liters,
        water_gallons=to_gallons(water_liters),
        surface_area=surface_area(length, width, height),
    )


def oxygen_exchange(top_sq_ft: float) -> OxygenExchange:
    """Rate gas exchange from the water surface area."""
    if top_sq_ft < OXYGEN_LOW_BELOW:
        return OxygenExchange.LOW
    if top_sq_ft < OXYGEN_GOOD_BELOW:
        return OxygenExchange.GOOD
    return OxygenExchange.EXCELLENT


def scale_to_volume(
    length: float,
    width: float,
    height: float,
    target_liters: float,
    *,
    minimum: float = 10.0,
    maximum: float = 120.0,
) -> tuple[float, float, float]:
    """Scale a triple uniformly so its volume approaches *target_liters*.

    Every axis is multiplied by the cube root of the volume ratio, which
    keeps the tank's proportions, then clamped to ``[minimum, maximum]``.
    Clamping means the result can miss the target; callers compare the
    resulting volume when that matters. A degenerate current or target
    volume leaves the triple unchanged.
    """
    current = volume(length, width, height)
    if not current > 0 or not target_liters > 0:
        return length, width, height
    ratio = (target_liters / current) ** (1 / 3)
    return (
        _clamp(length * ratio, minimum, maximum),
        _clamp(width * ratio, minimum, maximum),
        _clamp(height * ratio, minimum, maximum),
    )


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))

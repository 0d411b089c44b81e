"""Unit conversion constants and helpers.

The core works in inches and liters internally. Callers in metric
units are normalized here before any calculator runs.

NOTE: ``LITERS_TO_GALLONS`` and ``GALLONS_TO_LITERS`` are independent
published constants, not exact reciprocals (their product is about
1.000003). Both directions are kept as-is so figures match the
reference tables they came from.
"""

from __future__ import annotations

from tankctl.domain.types import UnitSystem, VolumeUnit

INCHES_TO_CM = 2.54
LITERS_TO_GALLONS = 0.264172
GALLONS_TO_LITERS = 3.78541
CUBIC_CM_PER_LITER = 1000.0
SQ_IN_PER_SQ_FT = 144.0

# Fraction of geometric volume taken by substrate, rock and decor.
DEFAULT_DISPLACEMENT = 0.10

UNIT_SYMBOLS: dict[str, str] = {
    "imperial": "in",
    "metric": "cm",
    "gallons": "gal",
    "liters": "L",
}


def inches_to_cm(inches: float) -> float:
    return inches * INCHES_TO_CM


def cm_to_inches(cm: float) -> float:
    return cm / INCHES_TO_CM


def liters_to_gallons(liters: float) -> float:
    return liters * LITERS_TO_GALLONS


def gallons_to_liters(gallons: float) -> float:
    return gallons * GALLONS_TO_LITERS


def to_inches(value: float, unit_system: UnitSystem | str) -> float:
    """Normalize a linear measurement in *unit_system* to inches."""
    if UnitSystem(unit_system) is UnitSystem.METRIC:
        return cm_to_inches(value)
    return value


def from_inches(inches: float, unit_system: UnitSystem | str) -> float:
    """Express a measurement in inches in the caller's *unit_system*."""
    if UnitSystem(unit_system) is UnitSystem.METRIC:
        return inches_to_cm(inches)
    return inches


def volume_to_liters(value: float, volume_unit: VolumeUnit | str) -> float:
    """Normalize a volume in *volume_unit* to liters."""
    if VolumeUnit(volume_unit) is VolumeUnit.GALLONS:
        return gallons_to_liters(value)
    return value


def volume_to_gallons(value: float, volume_unit: VolumeUnit | str) -> float:
    """Normalize a volume in *volume_unit* to gallons."""
    if VolumeUnit(volume_unit) is VolumeUnit.LITERS:
        return liters_to_gallons(value)
    return value


def liters_to_volume(liters: float, volume_unit: VolumeUnit | str) -> float:
    """Express *liters* in the caller's *volume_unit*."""
    if VolumeUnit(volume_unit) is VolumeUnit.GALLONS:
        return liters_to_gallons(liters)
    return liters


def symbol(unit: UnitSystem | VolumeUnit | str) -> str:
    """Short display symbol for a unit system or volume unit."""
    return UNIT_SYMBOLS.get(str(unit), str(unit))

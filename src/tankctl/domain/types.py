"""Classification enums shared across the domain.

Unit systems, equipment categories and the labels produced by the
calculators and the dimension search.
"""

from __future__ import annotations

from enum import StrEnum


class UnitSystem(StrEnum):
    """Linear unit system used by the caller."""

    IMPERIAL = "imperial"
    METRIC = "metric"


class VolumeUnit(StrEnum):
    """Volume unit used by the caller."""

    GALLONS = "gallons"
    LITERS = "liters"


class EquipmentCategory(StrEnum):
    """Closed set of equipment categories with a recommendation rule."""

    FILTER = "filter"
    HEATER = "heater"
    CHILLER = "chiller"
    UV_STERILIZER = "uv_sterilizer"
    AIR_PUMP = "air_pump"
    THERMOMETER = "thermometer"
    CIRCULATION_PUMP = "circulation_pump"
    AUTO_TOP_OFF = "auto_top_off"


class Criterion(StrEnum):
    """Observed value an equipment rule is keyed on."""

    VOLUME = "volume"
    SURFACE_AREA = "surface_area"
    FLOW = "flow"
    DIMENSIONS = "dimensions"


class AspectRatio(StrEnum):
    """Shape classification of a dimension triple."""

    WIDE = "wide"
    DEEP = "deep"
    TALL = "tall"
    LONG = "long"
    STANDARD = "standard"


class SizeCategory(StrEnum):
    """Volume class of a tank."""

    NANO = "nano"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"


class OxygenExchange(StrEnum):
    """Gas exchange rating from the top surface area."""

    LOW = "low"
    GOOD = "good"
    EXCELLENT = "excellent"


class VolumeTarget(StrEnum):
    """Which volume a resize request aims at."""

    TOTAL = "total"
    WATER = "water"

"""Standard retail tank sizes.

Dimensions are in inches with ``length`` the front panel. Nominal
volumes are the marketing figures, not the geometric volume.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_PRESET_TOLERANCE = 0.20


class Preset(BaseModel):
    """A named reference tank."""

    model_config = {"frozen": True}

    label: str
    length: float
    width: float
    height: float
    nominal_gallons: float

    def as_tuple(self) -> tuple[float, float, float]:
        return self.length, self.width, self.height


PRESETS: tuple[Preset, ...] = (
    Preset(label="10 Gallon", length=20, width=10, height=12, nominal_gallons=10),
    Preset(label="20 Gallon Long", length=30, width=12, height=12, nominal_gallons=20),
    Preset(label="20 Gallon High", length=24, width=12, height=16, nominal_gallons=20),
    Preset(label="29 Gallon", length=30, width=12, height=18, nominal_gallons=29),
    Preset(label="30 Gallon", length=36, width=12, height=16, nominal_gallons=30),
    Preset(label="40 Gallon Breeder", length=36, width=18, height=16, nominal_gallons=40),
    Preset(label="40 Gallon Long", length=48, width=12, height=16, nominal_gallons=40),
    Preset(label="55 Gallon", length=48, width=12, height=21, nominal_gallons=55),
    Preset(label="75 Gallon", length=48, width=18, height=21, nominal_gallons=75),
    Preset(label="90 Gallon", length=48, width=18, height=24, nominal_gallons=90),
    Preset(label="120 Gallon", length=48, width=24, height=24, nominal_gallons=120),
    Preset(label="125 Gallon", length=72, width=18, height=21, nominal_gallons=125),
    Preset(label="150 Gallon", length=72, width=18, height=24, nominal_gallons=150),
    Preset(label="180 Gallon", length=72, width=24, height=24, nominal_gallons=180),
)


def popular_presets(
    target_gallons: float,
    tolerance: float = DEFAULT_PRESET_TOLERANCE,
) -> list[Preset]:
    """Presets whose nominal volume is within *tolerance* of the target."""
    allowed = target_gallons * tolerance
    return [p for p in PRESETS if abs(p.nominal_gallons - target_gallons) <= allowed]


def find_preset(label: str) -> Preset | None:
    """Case-insensitive lookup by label."""
    wanted = label.strip().lower()
    for preset in PRESETS:
        if preset.label.lower() == wanted:
            return preset
    return None

"""Tests for unit conversion constants and helpers."""

import pytest

from tankctl.domain.types import UnitSystem, VolumeUnit
from tankctl.domain.units import (
    GALLONS_TO_LITERS,
    LITERS_TO_GALLONS,
    cm_to_inches,
    from_inches,
    gallons_to_liters,
    inches_to_cm,
    liters_to_gallons,
    liters_to_volume,
    symbol,
    to_inches,
    volume_to_gallons,
    volume_to_liters,
)


class TestConstants:
    def test_published_values(self) -> None:
        assert LITERS_TO_GALLONS == 0.264172
        assert GALLONS_TO_LITERS == 3.78541

    def test_constants_are_not_exact_reciprocals(self) -> None:
        assert LITERS_TO_GALLONS * GALLONS_TO_LITERS != 1.0
        assert LITERS_TO_GALLONS * GALLONS_TO_LITERS == pytest.approx(1.0, rel=1e-5)


class TestLinear:
    def test_inches_to_cm(self) -> None:
        assert inches_to_cm(10) == pytest.approx(25.4)

    def test_cm_to_inches(self) -> None:
        assert cm_to_inches(25.4) == pytest.approx(10)

    @pytest.mark.parametrize("unit", ["imperial", UnitSystem.IMPERIAL])
    def test_imperial_is_identity(self, unit: str) -> None:
        assert to_inches(48, unit) == 48
        assert from_inches(48, unit) == 48

    def test_metric_normalizes_to_inches(self) -> None:
        assert to_inches(121.92, UnitSystem.METRIC) == pytest.approx(48)
        assert from_inches(48, "metric") == pytest.approx(121.92)

    def test_unknown_unit_system_raises(self) -> None:
        with pytest.raises(ValueError):
            to_inches(1, "furlongs")


class TestVolume:
    def test_liters_to_gallons(self) -> None:
        assert liters_to_gallons(100) == pytest.approx(26.4172)

    def test_gallons_to_liters(self) -> None:
        assert gallons_to_liters(10) == pytest.approx(37.8541)

    def test_round_trip_within_tolerance(self) -> None:
        assert liters_to_gallons(gallons_to_liters(20)) == pytest.approx(20, rel=1e-5)

    def test_volume_to_liters(self) -> None:
        assert volume_to_liters(10, VolumeUnit.GALLONS) == pytest.approx(37.8541)
        assert volume_to_liters(10, "liters") == 10

    def test_volume_to_gallons(self) -> None:
        assert volume_to_gallons(100, VolumeUnit.LITERS) == pytest.approx(26.4172)
        assert volume_to_gallons(20, "gallons") == 20

    def test_liters_to_volume(self) -> None:
        assert liters_to_volume(100, "gallons") == pytest.approx(26.4172)
        assert liters_to_volume(100, VolumeUnit.LITERS) == 100


class TestSymbol:
    @pytest.mark.parametrize(
        "unit,expected",
        [
            (UnitSystem.IMPERIAL, "in"),
            (UnitSystem.METRIC, "cm"),
            (VolumeUnit.GALLONS, "gal"),
            (VolumeUnit.LITERS, "L"),
            ("cubits", "cubits"),
        ],
    )
    def test_symbols(self, unit: str, expected: str) -> None:
        assert symbol(unit) == expected

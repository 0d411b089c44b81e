"""BaseService — shared foundation for tankctl services.

Every service receives :class:`TankSettings` at construction time.
Settings decide the caller's units and every tunable the engines take;
services translate caller units to inches before calling the domain and
back again for the payload.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import ValidationError

from tankctl.config.settings import TankSettings
from tankctl.domain.dimensions import Dimensions
from tankctl.domain.units import from_inches, liters_to_volume, symbol, to_inches
from tankctl.services.result import ServiceError, ServiceResult


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TankService(BaseService):
            @traced
            def calculate(self, length, width, height) -> ServiceResult:
                dims = self._parse_dimensions(length, width, height)
                ...
    """

    def __init__(self, settings: TankSettings | None = None) -> None:
        self._settings = settings if settings is not None else TankSettings()

    @property
    def settings(self) -> TankSettings:
        return self._settings

    # --- Unit handling ---

    @property
    def length_symbol(self) -> str:
        return symbol(self._settings.unit_system)

    @property
    def volume_symbol(self) -> str:
        return symbol(self._settings.volume_unit)

    def _parse_dimensions(self, length: float, width: float, height: float) -> Dimensions:
        """Caller-unit triple as validated inches.

        Raises:
            ValidationError: An axis is non-positive or non-finite.
        """
        unit = self._settings.unit_system
        return Dimensions(
            length=to_inches(length, unit),
            width=to_inches(width, unit),
            height=to_inches(height, unit),
        )

    def _display_length(self, inches: float, places: int = 1) -> float:
        return round(from_inches(inches, self._settings.unit_system), places)

    def _display_volume(self, liters: float, places: int = 2) -> float:
        return round(liters_to_volume(liters, self._settings.volume_unit), places)

    def _dimensions_payload(self, length: float, width: float, height: float) -> dict[str, Any]:
        """Dimensions echoed in the caller's unit."""
        return {
            "length": length,
            "width": width,
            "height": height,
            "unit": self.length_symbol,
        }


def is_positive(value: float | None) -> bool:
    """True for a finite number above zero."""
    return value is not None and math.isfinite(value) and value > 0


def error_result(
    op: str,
    code: str,
    message: str,
    **detail: Any,
) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def invalid_dimensions(op: str, exc: ValidationError) -> ServiceResult:
    """INVALID_DIMENSIONS result naming the offending axes."""
    axes = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
    return error_result(
        op,
        "INVALID_DIMENSIONS",
        "Dimensions must be positive finite numbers",
        axes=axes,
    )

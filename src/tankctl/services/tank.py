"""TankService — advice for one tank given its dimensions.

Five surfaces, all taking dimensions in the configured linear unit:
- calculate: volume, water volume, surface area and classifications
- glass: panel thickness recommendation
- equipment: one recommendation per equipment category
- report: calculate + glass + equipment in one payload
- resize: cube-root scaling of a triple to a target volume

plus ``preset`` which runs ``report`` on a named reference tank.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from tankctl.domain import thickness
from tankctl.domain.dimensions import Dimensions
from tankctl.domain.equipment import EquipmentAdvisor
from tankctl.domain.presets import find_preset
from tankctl.domain.search import aspect_ratio_label, classify_aspect_ratio, classify_size
from tankctl.domain.types import VolumeTarget
from tankctl.domain.units import volume_to_liters
from tankctl.domain.volume import oxygen_exchange, scale_to_volume, volume, volume_info
from tankctl.services.base import (
    BaseService,
    error_result,
    invalid_dimensions,
    is_positive,
)
from tankctl.services.result import ServiceResult
from tankctl.services.telemetry import trace_span, traced

# Relative miss (percent) above which a resize is reported as clamped.
RESIZE_MISS_PERCENT = 0.5


class TankService(BaseService):
    """Volume, thickness and equipment advice for a dimension triple."""

    def _advisor(self) -> EquipmentAdvisor:
        cfg = self._settings.equipment
        return EquipmentAdvisor(turnover_min=cfg.turnover_min, turnover_max=cfg.turnover_max)

    # ------------------------------------------------------------------
    # calculate
    # ------------------------------------------------------------------

    @traced
    def calculate(self, length: float, width: float, height: float) -> ServiceResult:
        """Volume, water volume, surface area, size and shape."""
        try:
            dims = self._parse_dimensions(length, width, height)
        except ValidationError as exc:
            return invalid_dimensions("calculate", exc)

        data = {
            "dimensions": self._dimensions_payload(length, width, height),
            **self._volume_data(dims),
        }
        return ServiceResult(ok=True, op="calculate", data=data)

    # ------------------------------------------------------------------
    # glass
    # ------------------------------------------------------------------

    @traced
    def glass(self, length: float, width: float, height: float) -> ServiceResult:
        """Panel thickness with safety note and considerations."""
        try:
            dims = self._parse_dimensions(length, width, height)
        except ValidationError as exc:
            return invalid_dimensions("glass", exc)

        data = {
            "dimensions": self._dimensions_payload(length, width, height),
            **self._glass_data(dims),
        }
        return ServiceResult(ok=True, op="glass", data=data)

    # ------------------------------------------------------------------
    # equipment
    # ------------------------------------------------------------------

    @traced
    def equipment(
        self,
        length: float,
        width: float,
        height: float,
        *,
        flow_gph: float | None = None,
    ) -> ServiceResult:
        """Recommendations for every equipment category.

        Args:
            flow_gph: Known filter flow. Estimated from the turnover
                range when omitted.
        """
        try:
            dims = self._parse_dimensions(length, width, height)
        except ValidationError as exc:
            return invalid_dimensions("equipment", exc)
        if flow_gph is not None and not is_positive(flow_gph):
            return error_result(
                "equipment",
                "INVALID_CONSTRAINT",
                "Filter flow must be a positive number",
                flow_gph=flow_gph,
            )

        data = {
            "dimensions": self._dimensions_payload(length, width, height),
            **self._equipment_data(dims, flow_gph),
        }
        return ServiceResult(ok=True, op="equipment", data=data)

    # ------------------------------------------------------------------
    # report
    # ------------------------------------------------------------------

    @traced
    def report(
        self,
        length: float,
        width: float,
        height: float,
        *,
        flow_gph: float | None = None,
    ) -> ServiceResult:
        """Everything the other surfaces compute, in one payload."""
        try:
            dims = self._parse_dimensions(length, width, height)
        except ValidationError as exc:
            return invalid_dimensions("report", exc)
        if flow_gph is not None and not is_positive(flow_gph):
            return error_result(
                "report",
                "INVALID_CONSTRAINT",
                "Filter flow must be a positive number",
                flow_gph=flow_gph,
            )

        data = self._report_data(dims, flow_gph)
        data["dimensions"] = self._dimensions_payload(length, width, height)
        return ServiceResult(ok=True, op="report", data=data)

    @traced
    def preset(self, label: str, *, flow_gph: float | None = None) -> ServiceResult:
        """Full report for a reference tank looked up by label."""
        found = find_preset(label)
        if found is None:
            return error_result(
                "report",
                "UNKNOWN_PRESET",
                f"No preset named {label!r}",
                label=label,
            )
        if flow_gph is not None and not is_positive(flow_gph):
            return error_result(
                "report",
                "INVALID_CONSTRAINT",
                "Filter flow must be a positive number",
                flow_gph=flow_gph,
            )

        dims = Dimensions(length=found.length, width=found.width, height=found.height)
        data = self._report_data(dims, flow_gph)
        data["dimensions"] = self._dimensions_payload(
            self._display_length(dims.length),
            self._display_length(dims.width),
            self._display_length(dims.height),
        )
        data["preset"] = found.label
        return ServiceResult(ok=True, op="report", data=data)

    # ------------------------------------------------------------------
    # resize
    # ------------------------------------------------------------------

    @traced
    def resize(
        self,
        length: float,
        width: float,
        height: float,
        target_volume: float,
        *,
        target: VolumeTarget = VolumeTarget.TOTAL,
    ) -> ServiceResult:
        """Scale a triple uniformly so its volume approaches *target_volume*.

        Args:
            target_volume: Desired volume in the configured volume unit.
            target: Whether *target_volume* is the geometric volume or
                the water volume after displacement.
        """
        try:
            dims = self._parse_dimensions(length, width, height)
        except ValidationError as exc:
            return invalid_dimensions("resize", exc)
        if not is_positive(target_volume):
            return error_result(
                "resize",
                "INVALID_VOLUME",
                "Target volume must be a positive number",
                target=target_volume,
            )

        displacement = self._settings.volume.displacement
        target_liters = volume_to_liters(target_volume, self._settings.volume_unit)
        if VolumeTarget(target) is VolumeTarget.WATER:
            target_liters /= 1 - displacement

        bounds = self._settings.resize
        with trace_span("scale") as span:
            new_length, new_width, new_height = scale_to_volume(
                *dims.as_tuple(),
                target_liters,
                minimum=bounds.min_inches,
                maximum=bounds.max_inches,
            )
            if span:
                span.annotate("target_liters", round(target_liters, 2))

        achieved = volume(new_length, new_width, new_height)
        miss = abs(achieved - target_liters) / target_liters * 100
        clamped = miss > RESIZE_MISS_PERCENT

        warnings: list[str] = []
        if clamped:
            low = self._display_length(bounds.min_inches)
            high = self._display_length(bounds.max_inches)
            warnings.append(
                f"Axes clamped to {low:g}-{high:g} {self.length_symbol}; "
                f"result misses the target by {miss:.1f}%"
            )

        info = volume_info(new_length, new_width, new_height, displacement)
        data = {
            "original": self._dimensions_payload(length, width, height),
            "dimensions": self._dimensions_payload(
                self._display_length(new_length),
                self._display_length(new_width),
                self._display_length(new_height),
            ),
            "target": target_volume,
            "target_kind": str(target),
            "volume_unit": self.volume_symbol,
            "volume": self._display_volume(info.geometric_liters),
            "water_volume": self._display_volume(info.water_liters),
            "deviation_percent": round(miss, 2),
            "clamped": clamped,
        }
        return ServiceResult(ok=True, op="resize", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # Payload builders (dimensions in inches)
    # ------------------------------------------------------------------

    def _volume_data(self, dims: Dimensions) -> dict[str, Any]:
        info = volume_info(*dims.as_tuple(), self._settings.volume.displacement)
        area = info.surface_area
        return {
            "volume_unit": self.volume_symbol,
            "volume": self._display_volume(info.geometric_liters),
            "water_volume": self._display_volume(info.water_liters),
            "volume_liters": round(info.geometric_liters, 2),
            "volume_gallons": round(info.geometric_gallons, 2),
            "water_liters": round(info.water_liters, 2),
            "water_gallons": round(info.water_gallons, 2),
            "displacement": self._settings.volume.displacement,
            "surface_area": {
                "total_sq_in": round(area.total_sq_in, 2),
                "total_sq_ft": round(area.total_sq_ft, 2),
                "top_sq_in": round(area.top_sq_in, 2),
                "top_sq_ft": round(area.top_sq_ft, 2),
            },
            "oxygen_exchange": str(oxygen_exchange(area.top_sq_ft)),
            "size_category": str(classify_size(info.geometric_gallons)),
            "aspect_ratio": str(classify_aspect_ratio(*dims.as_tuple())),
            "aspect_label": aspect_ratio_label(*dims.as_tuple()),
        }

    def _glass_data(self, dims: Dimensions) -> dict[str, Any]:
        rec = thickness.recommend(*dims.as_tuple())
        return {
            "thickness": rec.thickness,
            "thickness_unit": "mm",
            "label": rec.label,
            "safety_note": rec.safety_note,
            "considerations": rec.considerations,
            "requires_special_attention": rec.requires_special_attention,
        }

    def _equipment_data(self, dims: Dimensions, flow_gph: float | None) -> dict[str, Any]:
        advisor = self._advisor()
        info = volume_info(*dims.as_tuple(), self._settings.volume.displacement)
        gallons = info.geometric_gallons
        recommendations = advisor.all_recommendations(
            dims.length,
            dims.width,
            dims.height,
            gallons,
            info.surface_area,
            flow_gph=flow_gph,
        )
        flow = flow_gph if flow_gph is not None else advisor.estimate_flow(gallons)
        return {
            "volume_gallons": round(gallons, 2),
            "flow_gph": round(flow, 1),
            "flow_estimated": flow_gph is None,
            "turnover": [advisor.turnover_min, advisor.turnover_max],
            "recommendations": {str(k): v for k, v in recommendations.items()},
        }

    def _report_data(self, dims: Dimensions, flow_gph: float | None) -> dict[str, Any]:
        with trace_span("volume"):
            volume_data = self._volume_data(dims)
        with trace_span("glass"):
            glass_data = self._glass_data(dims)
        with trace_span("equipment"):
            equipment_data = self._equipment_data(dims, flow_gph)
        return {
            "volume": volume_data,
            "glass": glass_data,
            "equipment": equipment_data,
        }

"""SearchService — volume-first lookups.

- find: reverse dimension search for a target volume
- presets: reference tanks, optionally those near a target volume
"""

from __future__ import annotations

from typing import Any

from tankctl.domain.presets import PRESETS, Preset, popular_presets
from tankctl.domain.search import DimensionSearch, SearchCandidate, classify_size
from tankctl.domain.units import liters_to_gallons, to_inches, volume_to_gallons
from tankctl.domain.volume import volume
from tankctl.services.base import BaseService, error_result, is_positive
from tankctl.services.result import ServiceResult
from tankctl.services.telemetry import trace_span, traced


class SearchService(BaseService):
    """Reverse search and preset lookup."""

    # ------------------------------------------------------------------
    # find
    # ------------------------------------------------------------------

    @traced
    def find(
        self,
        target_volume: float,
        *,
        max_length: float | None = None,
        max_width: float | None = None,
        max_height: float | None = None,
        limit: int | None = None,
        tolerance: float | None = None,
    ) -> ServiceResult:
        """Dimension triples within tolerance of *target_volume*, best first.

        Args:
            target_volume: Desired volume in the configured volume unit.
            max_length: Cap on length in the configured linear unit.
            max_width: Cap on width.
            max_height: Cap on height.
            limit: Maximum results. Defaults to ``[search].max_results``.
            tolerance: Allowed deviation as a fraction in (0, 1].
                Defaults to ``[search].tolerance``.
        """
        cfg = self._settings.search
        if not is_positive(target_volume):
            return error_result(
                "find",
                "INVALID_VOLUME",
                "Target volume must be a positive number",
                target=target_volume,
            )

        caps = {"max_length": max_length, "max_width": max_width, "max_height": max_height}
        bad = sorted(
            name for name, value in caps.items() if value is not None and not is_positive(value)
        )
        if bad:
            return error_result(
                "find",
                "INVALID_CONSTRAINT",
                "Dimension constraints must be positive numbers",
                constraints=bad,
            )

        max_results = cfg.max_results if limit is None else limit
        if max_results < 1:
            return error_result(
                "find",
                "INVALID_CONSTRAINT",
                "Result limit must be at least 1",
                limit=limit,
            )

        tol = cfg.tolerance if tolerance is None else tolerance
        if not is_positive(tol) or tol > 1:
            return error_result(
                "find",
                "INVALID_TOLERANCE",
                "Tolerance must be a fraction in (0, 1]",
                tolerance=tol,
            )

        unit = self._settings.unit_system
        inches = {
            name: (to_inches(value, unit) if value is not None else None)
            for name, value in caps.items()
        }
        target_gallons = volume_to_gallons(target_volume, self._settings.volume_unit)

        search = DimensionSearch(
            min_dimension=cfg.min_dimension,
            max_dimension=cfg.max_dimension,
            max_height=cfg.max_height,
            tolerance=tol,
            include_presets=cfg.include_presets,
        )
        with trace_span("grid") as span:
            if span:
                widths, lengths, heights = search.grid(**inches)
                span.annotate("triples", len(widths) * len(lengths) * len(heights))
            candidates = search.find(target_gallons, max_results=max_results, **inches)
            if span:
                span.annotate("returned", len(candidates))

        warnings: list[str] = []
        if not candidates:
            warnings.append(
                f"No dimensions within {tol:.0%} of {target_volume:g} {self.volume_symbol}"
            )

        data = {
            "target": target_volume,
            "volume_unit": self.volume_symbol,
            "target_gallons": round(target_gallons, 2),
            "tolerance": tol,
            "unit": self.length_symbol,
            "count": len(candidates),
            "items": [self._candidate_item(c) for c in candidates],
        }
        return ServiceResult(ok=True, op="find", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # presets
    # ------------------------------------------------------------------

    @traced
    def presets(self, target_volume: float | None = None) -> ServiceResult:
        """All reference tanks, or those within ``[search].preset_tolerance``.

        Args:
            target_volume: Volume in the configured volume unit. Lists the
                whole table when omitted.
        """
        if target_volume is None:
            matches: list[Preset] = list(PRESETS)
        elif not is_positive(target_volume):
            return error_result(
                "presets",
                "INVALID_VOLUME",
                "Target volume must be a positive number",
                target=target_volume,
            )
        else:
            gallons = volume_to_gallons(target_volume, self._settings.volume_unit)
            matches = popular_presets(gallons, self._settings.search.preset_tolerance)

        warnings: list[str] = []
        if target_volume is not None and not matches:
            warnings.append(f"No presets near {target_volume:g} {self.volume_symbol}")

        data = {
            "target": target_volume,
            "volume_unit": self.volume_symbol,
            "unit": self.length_symbol,
            "count": len(matches),
            "items": [self._preset_item(p) for p in matches],
        }
        return ServiceResult(ok=True, op="presets", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # Item builders
    # ------------------------------------------------------------------

    def _candidate_item(self, candidate: SearchCandidate) -> dict[str, Any]:
        return {
            "length": self._display_length(candidate.length),
            "width": self._display_length(candidate.width),
            "height": self._display_length(candidate.height),
            "volume": self._display_volume(candidate.volume_liters),
            "volume_gallons": round(candidate.volume_gallons, 2),
            "deviation_percent": round(candidate.percent_deviation, 2),
            "aspect_ratio": str(candidate.aspect_ratio),
            "aspect_label": candidate.aspect_label,
            "size_category": str(classify_size(candidate.volume_gallons)),
            "preset": candidate.preset,
        }

    def _preset_item(self, preset: Preset) -> dict[str, Any]:
        liters = volume(*preset.as_tuple())
        return {
            "label": preset.label,
            "length": self._display_length(preset.length),
            "width": self._display_length(preset.width),
            "height": self._display_length(preset.height),
            "nominal_gallons": preset.nominal_gallons,
            "volume": self._display_volume(liters),
            "volume_gallons": round(liters_to_gallons(liters), 2),
        }

"""Reverse dimension search: target volume to candidate dimension triples.

The search enumerates a coarse grid of widths, lengths and heights,
keeps triples whose volume is within tolerance of the target, ranks them
by closeness and drops duplicates. Grid steps widen as dimensions grow
(2 below 24 in, 4 below 48 in, 6 above), which keeps the cross product
to roughly ten thousand triples at the default bounds.

Standard retail sizes are usually off-grid (a 30 in panel is never
visited), so presets that fit the constraints are scored under the same rules
when ``include_presets`` is set. They go in ahead of the grid, so a grid
triple that matches a preset exactly keeps the preset label after the
stable sort and deduplication.

For a single answer without enumeration see
:func:`tankctl.domain.volume.scale_to_volume`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from pydantic import BaseModel

from tankctl.domain.presets import PRESETS, Preset
from tankctl.domain.types import AspectRatio, SizeCategory
from tankctl.domain.volume import to_gallons, to_liters, volume

logger = logging.getLogger(__name__)

DEFAULT_MIN_DIMENSION = 10.0
DEFAULT_MAX_DIMENSION = 120.0
DEFAULT_MAX_HEIGHT = 60.0
MIN_HEIGHT = 12.0
DEFAULT_TOLERANCE = 0.10
DEFAULT_MAX_RESULTS = 10

# (values below this, step), ascending.
STEP_SCHEDULE: tuple[tuple[float, float], ...] = (
    (24, 2),
    (48, 4),
    (math.inf, 6),
)

# (upper gallons, category), ascending; above the last is extra-large.
SIZE_THRESHOLDS: tuple[tuple[float, SizeCategory], ...] = (
    (20, SizeCategory.NANO),
    (40, SizeCategory.SMALL),
    (75, SizeCategory.MEDIUM),
    (150, SizeCategory.LARGE),
)


class SearchCandidate(BaseModel):
    """One triple that lands within tolerance of the target volume."""

    model_config = {"frozen": True}

    length: int
    width: int
    height: int
    volume_liters: float
    volume_gallons: float
    percent_deviation: float
    aspect_ratio: AspectRatio
    aspect_label: str
    footprint: int
    depth: int
    preset: str | None = None

    @property
    def key(self) -> tuple[int, int, int]:
        return self.width, self.length, self.height


def dimension_range(minimum: float, maximum: float) -> list[float]:
    """Grid values from *minimum* up to *maximum* on the step schedule."""
    values: list[float] = []
    current = minimum
    while current <= maximum:
        values.append(current)
        current += _step(current)
    return values


def _step(value: float) -> float:
    for below, step in STEP_SCHEDULE:
        if value < below:
            return step
    return STEP_SCHEDULE[-1][1]


def classify_aspect_ratio(length: float, width: float, height: float) -> AspectRatio:
    """Shape of a triple. The first matching check wins, in this order."""
    if length > width * 2:
        return AspectRatio.WIDE
    if width > length * 1.5:
        return AspectRatio.DEEP
    if height > length * 0.8:
        return AspectRatio.TALL
    if length > height * 2:
        return AspectRatio.LONG
    return AspectRatio.STANDARD


def aspect_ratio_label(length: float, width: float, height: float) -> str:
    """Human label with the ratio that drove the classification."""
    shape = classify_aspect_ratio(length, width, height)
    if shape is AspectRatio.DEEP:
        return f"Deep ({width / length:.1f}:1 W:L)"
    if shape in (AspectRatio.TALL, AspectRatio.LONG):
        return f"{shape.value.title()} ({length / height:.1f}:1 L:H)"
    return f"{shape.value.title()} ({length / width:.1f}:1 L:W)"


def classify_size(volume_gallons: float) -> SizeCategory:
    for upper, category in SIZE_THRESHOLDS:
        if volume_gallons <= upper:
            return category
    return SizeCategory.EXTRA_LARGE


def unique_results(
    candidates: Iterable[SearchCandidate],
    max_results: int,
) -> list[SearchCandidate]:
    """First occurrence of each rounded triple, at most *max_results*."""
    unique: list[SearchCandidate] = []
    seen: set[tuple[int, int, int]] = set()
    for candidate in candidates:
        if len(unique) >= max_results:
            break
        if candidate.key in seen:
            continue
        seen.add(candidate.key)
        unique.append(candidate)
    return unique


class DimensionSearch:
    """Brute-force inverse of the volume function over a coarse grid.

    Args:
        min_dimension: Smallest length and width tried (inches).
        max_dimension: Default cap on length and width.
        max_height: Default cap on height.
        min_height: Smallest height tried, independent of *min_dimension*.
        tolerance: Allowed deviation from the target as a fraction.
        include_presets: Also score preset sizes that fit the constraints.
    """

    def __init__(
        self,
        *,
        min_dimension: float = DEFAULT_MIN_DIMENSION,
        max_dimension: float = DEFAULT_MAX_DIMENSION,
        max_height: float = DEFAULT_MAX_HEIGHT,
        min_height: float = MIN_HEIGHT,
        tolerance: float = DEFAULT_TOLERANCE,
        include_presets: bool = True,
    ) -> None:
        self.min_dimension = min_dimension
        self.max_dimension = max_dimension
        self.max_height = max_height
        self.min_height = min_height
        self.tolerance = tolerance
        self.include_presets = include_presets

    def grid(
        self,
        *,
        max_length: float | None = None,
        max_width: float | None = None,
        max_height: float | None = None,
    ) -> tuple[list[float], list[float], list[float]]:
        """Width, length and height sequences for the given caps.

        Caps only narrow the configured maxima; a larger cap is ignored.
        """
        length_cap, width_cap, height_cap = self.caps(max_length, max_width, max_height)
        widths = dimension_range(self.min_dimension, width_cap)
        lengths = dimension_range(self.min_dimension, length_cap)
        heights = dimension_range(self.min_height, height_cap)
        return widths, lengths, heights

    def caps(
        self,
        max_length: float | None = None,
        max_width: float | None = None,
        max_height: float | None = None,
    ) -> tuple[float, float, float]:
        """Effective (length, width, height) limits after applying caller caps."""
        return (
            _tightened(max_length, self.max_dimension),
            _tightened(max_width, self.max_dimension),
            _tightened(max_height, self.max_height),
        )

    def score(
        self,
        length: float,
        width: float,
        height: float,
        target_liters: float,
        *,
        preset: str | None = None,
    ) -> SearchCandidate | None:
        """Candidate for a triple, or None when it misses the tolerance."""
        liters = volume(length, width, height)
        deviation = abs(liters - target_liters) / target_liters * 100
        if deviation > self.tolerance * 100:
            return None
        return SearchCandidate(
            length=round(length),
            width=round(width),
            height=round(height),
            volume_liters=liters,
            volume_gallons=to_gallons(liters),
            percent_deviation=deviation,
            aspect_ratio=classify_aspect_ratio(length, width, height),
            aspect_label=aspect_ratio_label(length, width, height),
            footprint=round(length * width),
            depth=round(height),
            preset=preset,
        )

    def find(
        self,
        target_gallons: float,
        *,
        max_length: float | None = None,
        max_width: float | None = None,
        max_height: float | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> list[SearchCandidate]:
        """Closest triples to *target_gallons*, best first.

        Returns an empty list when nothing is within tolerance or the
        target is not a positive number.
        """
        if not target_gallons > 0 or max_results <= 0:
            return []

        target_liters = to_liters(target_gallons)
        widths, lengths, heights = self.grid(
            max_length=max_length, max_width=max_width, max_height=max_height
        )

        kept: list[SearchCandidate] = []
        if self.include_presets:
            caps = self.caps(max_length, max_width, max_height)
            for preset in _fitting_presets(caps, self.min_height):
                candidate = self.score(
                    preset.length,
                    preset.width,
                    preset.height,
                    target_liters,
                    preset=preset.label,
                )
                if candidate is not None:
                    kept.append(candidate)

        for width in widths:
            for length in lengths:
                for height in heights:
                    candidate = self.score(length, width, height, target_liters)
                    if candidate is not None:
                        kept.append(candidate)

        kept.sort(key=lambda c: c.percent_deviation)
        results = unique_results(kept, max_results)
        logger.debug(
            "Dimension search for %.1f gal: %d triples, %d within tolerance, %d returned",
            target_gallons,
            len(widths) * len(lengths) * len(heights),
            len(kept),
            len(results),
        )
        return results


def _tightened(cap: float | None, limit: float) -> float:
    return limit if cap is None else min(cap, limit)


def _fitting_presets(
    caps: tuple[float, float, float],
    min_height: float,
) -> list[Preset]:
    max_length, max_width, max_height = caps
    return [
        p
        for p in PRESETS
        if p.length <= max_length
        and p.width <= max_width
        and min_height <= p.height <= max_height
    ]

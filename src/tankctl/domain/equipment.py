"""Equipment recommendation rules and the advisor that dispatches them.

Each equipment category has exactly one :class:`EquipmentRule`. Rules
are keyed on one :class:`~tankctl.domain.types.Criterion`:

- volume (gallons): heater, chiller, thermometer
- surface area (top ft²): air pump, auto top-off
- flow (GPH): UV sterilizer
- dimensions: circulation pump (volume bands plus a shape check)

The filter rule is a composite of volume bands and surface-area
adjustments.

Dispatch is a closed mapping from :class:`EquipmentCategory` to rule;
:class:`EquipmentAdvisor` refuses a mapping that misses a category.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from tankctl.domain.rules import RuleTable
from tankctl.domain.types import Criterion, EquipmentCategory
from tankctl.domain.volume import SurfaceArea

logger = logging.getLogger(__name__)

PLACEHOLDER = "--"

DEFAULT_TURNOVER_MIN = 3.0
DEFAULT_TURNOVER_MAX = 5.0

INF = math.inf

FILTER_TABLE = RuleTable.of(
    (20, "10-20 GPH canister or small HOB filter"),
    (40, "20-40 GPH canister or medium HOB filter"),
    (75, "40-75 GPH canister filter"),
    (125, "75-125 GPH canister filter"),
    (200, "125-200 GPH canister filter"),
    (INF, "200+ GPH canister filter or sump system"),
)

HEATER_TABLE = RuleTable.of(
    (10, "50-100W submersible heater"),
    (20, "100-150W submersible heater"),
    (40, "150-200W submersible heater"),
    (75, "200-300W submersible heater"),
    (125, "300-400W submersible heater"),
    (200, "400-600W submersible heater"),
    (INF, "600W+ submersible or inline heater"),
)

CHILLER_TABLE = RuleTable.of(
    (20, "1/10 HP chiller for small tanks in warm climates"),
    (75, "1/4 HP chiller for medium tanks"),
    (125, "1/3 HP chiller for large tanks"),
    (INF, "1/2 to 1 HP chiller for very large tanks"),
)

UV_STERILIZER_TABLE = RuleTable.of(
    (100, "5-9W UV sterilizer"),
    (200, "11-18W UV sterilizer"),
    (400, "25-36W UV sterilizer"),
    (INF, "55W+ UV sterilizer or multiple units"),
)

AIR_PUMP_TABLE = RuleTable.of(
    (2, "10-30 GPH air pump with single airstone"),
    (4, "30-60 GPH air pump with dual airstones"),
    (INF, "60-100 GPH air pump with manifold system"),
)

THERMOMETER_TABLE = RuleTable.of(
    (20, "Digital stick thermometer"),
    (75, "Digital thermometer with external probe"),
    (INF, "Digital thermometer with multiple probes"),
)

CIRCULATION_PUMP_TABLE = RuleTable.of(
    (20, "200-400 GPH powerhead"),
    (55, "400-800 GPH powerhead"),
    (75, "800-1200 GPH powerhead or multiple units"),
    (INF, "1200+ GPH powerhead or multiple units"),
)

AUTO_TOP_OFF_TABLE = RuleTable.of(
    (2, "1-2 gallon reservoir with small pump"),
    (4, "2-5 gallon reservoir with medium pump"),
    (INF, "5+ gallon reservoir with large pump"),
)

# Filter adjustments by top surface area (ft²), evaluated in this order.
SPONGE_MAX_AREA = 1.5
SPONGE_MAX_VOLUME = 20
SKIMMER_MIN_AREA = 6
POWERHEAD_MAX_AREA = 3
POWERHEAD_MIN_VOLUME = 30

SPONGE_FILTER = "5-10 GPH sponge filter ideal for shallow tanks with small surface area"
SKIMMER_SUFFIX = " + surface skimmer for large surface area"
POWERHEAD_SUFFIX = " - consider adding powerhead for better circulation in tall/deep tanks"

ELONGATED_RATIO = 1.5
MULTIPLE_UNITS_SUFFIX = " - consider multiple units for even flow in long tanks"


def estimate_filter_flow(
    volume_gallons: float,
    turnover_min: float = DEFAULT_TURNOVER_MIN,
    turnover_max: float = DEFAULT_TURNOVER_MAX,
) -> float:
    """Hourly filter flow (GPH) at the midpoint of the turnover range."""
    return (volume_gallons * turnover_min + volume_gallons * turnover_max) / 2


@dataclass(frozen=True)
class TankMetrics:
    """Everything a rule may observe about one tank.

    ``flow_gph`` is the filter flow when the caller knows it; rules that
    need a flow and find None estimate one from the volume.
    """

    volume_gallons: float
    top_sq_ft: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    flow_gph: float | None = None
    turnover_min: float = DEFAULT_TURNOVER_MIN
    turnover_max: float = DEFAULT_TURNOVER_MAX

    @property
    def effective_flow(self) -> float:
        if self.flow_gph is not None:
            return self.flow_gph
        return estimate_filter_flow(self.volume_gallons, self.turnover_min, self.turnover_max)


class EquipmentRule(ABC):
    """Abstract recommendation rule for one equipment category."""

    def __init__(self, table: RuleTable) -> None:
        self.table = table

    @property
    @abstractmethod
    def criterion(self) -> Criterion:
        """The observed value this rule is keyed on."""
        ...

    @abstractmethod
    def observe(self, metrics: TankMetrics) -> float:
        """Extract the criterion value from *metrics*."""
        ...

    def recommend(self, metrics: TankMetrics) -> str:
        return self.table.lookup(self.observe(metrics))


class VolumeRule(EquipmentRule):
    """Bands on tank volume in gallons."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.VOLUME

    def observe(self, metrics: TankMetrics) -> float:
        return metrics.volume_gallons


class SurfaceAreaRule(EquipmentRule):
    """Bands on the top (water surface) area in square feet."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.SURFACE_AREA

    def observe(self, metrics: TankMetrics) -> float:
        return metrics.top_sq_ft


class FlowRule(EquipmentRule):
    """Bands on filter flow in GPH, estimated from volume when unknown."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.FLOW

    def observe(self, metrics: TankMetrics) -> float:
        return metrics.effective_flow


class CirculationRule(EquipmentRule):
    """Volume bands with a multi-unit hint for elongated tanks."""

    @property
    def criterion(self) -> Criterion:
        return Criterion.DIMENSIONS

    def observe(self, metrics: TankMetrics) -> float:
        return metrics.volume_gallons

    def recommend(self, metrics: TankMetrics) -> str:
        text = super().recommend(metrics)
        if metrics.length > metrics.width * ELONGATED_RATIO:
            text += MULTIPLE_UNITS_SUFFIX
        return text


class FilterRule(VolumeRule):
    """Volume bands adjusted by the water surface area.

    Only the first matching adjustment applies: the sponge-filter
    override for small shallow tanks, then the skimmer suffix for large
    surfaces, then the powerhead suffix for tall tanks with a small top.
    """

    def recommend(self, metrics: TankMetrics) -> str:
        text = super().recommend(metrics)
        area = metrics.top_sq_ft
        volume = metrics.volume_gallons

        if area < SPONGE_MAX_AREA and volume < SPONGE_MAX_VOLUME:
            return SPONGE_FILTER
        if area > SKIMMER_MIN_AREA:
            return text + SKIMMER_SUFFIX
        if area < POWERHEAD_MAX_AREA and volume > POWERHEAD_MIN_VOLUME:
            return text + POWERHEAD_SUFFIX
        return text


def default_rules() -> dict[EquipmentCategory, EquipmentRule]:
    """The built-in rule for every equipment category."""
    return {
        EquipmentCategory.FILTER: FilterRule(FILTER_TABLE),
        EquipmentCategory.HEATER: VolumeRule(HEATER_TABLE),
        EquipmentCategory.CHILLER: VolumeRule(CHILLER_TABLE),
        EquipmentCategory.UV_STERILIZER: FlowRule(UV_STERILIZER_TABLE),
        EquipmentCategory.AIR_PUMP: SurfaceAreaRule(AIR_PUMP_TABLE),
        EquipmentCategory.THERMOMETER: VolumeRule(THERMOMETER_TABLE),
        EquipmentCategory.CIRCULATION_PUMP: CirculationRule(CIRCULATION_PUMP_TABLE),
        EquipmentCategory.AUTO_TOP_OFF: SurfaceAreaRule(AUTO_TOP_OFF_TABLE),
    }


class EquipmentAdvisor:
    """Recommends equipment capacity for every category.

    Args:
        rules: Category-to-rule mapping; must cover every
            :class:`EquipmentCategory`. Defaults to :func:`default_rules`.
        turnover_min: Lower filter turnover (tank volumes per hour).
        turnover_max: Upper filter turnover.
    """

    def __init__(
        self,
        rules: Mapping[EquipmentCategory, EquipmentRule] | None = None,
        *,
        turnover_min: float = DEFAULT_TURNOVER_MIN,
        turnover_max: float = DEFAULT_TURNOVER_MAX,
    ) -> None:
        resolved = dict(rules) if rules is not None else default_rules()
        missing = [c for c in EquipmentCategory if c not in resolved]
        if missing:
            msg = f"No equipment rule for: {', '.join(missing)}"
            raise ValueError(msg)
        self._rules = resolved
        self.turnover_min = turnover_min
        self.turnover_max = turnover_max

    def rule(self, category: EquipmentCategory) -> EquipmentRule:
        return self._rules[category]

    def metrics(
        self,
        volume_gallons: float,
        *,
        surface_area: SurfaceArea | None = None,
        length: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        flow_gph: float | None = None,
    ) -> TankMetrics:
        """Bundle observed values, applying this advisor's turnover range."""
        return TankMetrics(
            volume_gallons=volume_gallons,
            top_sq_ft=surface_area.top_sq_ft if surface_area is not None else 0.0,
            length=length,
            width=width,
            height=height,
            flow_gph=flow_gph,
            turnover_min=self.turnover_min,
            turnover_max=self.turnover_max,
        )

    def estimate_flow(self, volume_gallons: float) -> float:
        return estimate_filter_flow(volume_gallons, self.turnover_min, self.turnover_max)

    def recommend(self, category: EquipmentCategory | str, metrics: TankMetrics) -> str:
        """Recommendation for one category.

        Names outside :class:`EquipmentCategory` get :data:`PLACEHOLDER`.
        """
        try:
            key = EquipmentCategory(category)
        except ValueError:
            logger.warning("Unknown equipment category: %s", category)
            return PLACEHOLDER
        return self._rules[key].recommend(metrics)

    # --- One entry point per category ---

    def recommend_filter(self, volume_gallons: float, surface_area: SurfaceArea | None) -> str:
        metrics = self.metrics(volume_gallons, surface_area=surface_area)
        return self.recommend(EquipmentCategory.FILTER, metrics)

    def recommend_heater(self, volume_gallons: float) -> str:
        return self.recommend(EquipmentCategory.HEATER, self.metrics(volume_gallons))

    def recommend_chiller(self, volume_gallons: float) -> str:
        return self.recommend(EquipmentCategory.CHILLER, self.metrics(volume_gallons))

    def recommend_uv_sterilizer(self, volume_gallons: float, flow_gph: float | None = None) -> str:
        metrics = self.metrics(volume_gallons, flow_gph=flow_gph)
        return self.recommend(EquipmentCategory.UV_STERILIZER, metrics)

    def recommend_air_pump(self, surface_area: SurfaceArea | None) -> str:
        metrics = self.metrics(0.0, surface_area=surface_area)
        return self.recommend(EquipmentCategory.AIR_PUMP, metrics)

    def recommend_thermometer(self, volume_gallons: float) -> str:
        return self.recommend(EquipmentCategory.THERMOMETER, self.metrics(volume_gallons))

    def recommend_circulation_pump(self, volume_gallons: float, length: float, width: float) -> str:
        metrics = self.metrics(volume_gallons, length=length, width=width)
        return self.recommend(EquipmentCategory.CIRCULATION_PUMP, metrics)

    def recommend_auto_top_off(self, surface_area: SurfaceArea | None) -> str:
        metrics = self.metrics(0.0, surface_area=surface_area)
        return self.recommend(EquipmentCategory.AUTO_TOP_OFF, metrics)

    def all_recommendations(
        self,
        length: float,
        width: float,
        height: float,
        volume_gallons: float,
        surface_area: SurfaceArea | None,
        *,
        flow_gph: float | None = None,
    ) -> dict[EquipmentCategory, str]:
        """Recommendations for every category; never partial."""
        metrics = self.metrics(
            volume_gallons,
            surface_area=surface_area,
            length=length,
            width=width,
            height=height,
            flow_gph=flow_gph,
        )
        return {category: self.recommend(category, metrics) for category in EquipmentCategory}

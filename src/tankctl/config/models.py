"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tankctl.toml only contains
overrides. Rule tables, thickness grades and presets are versioned with
the code and are deliberately not configurable.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class VolumeConfig(BaseModel):
    """[volume] section."""

    model_config = {"frozen": True}

    displacement: float = Field(default=0.10, ge=0, lt=1)


class EquipmentConfig(BaseModel):
    """[equipment] section."""

    model_config = {"frozen": True}

    turnover_min: float = Field(default=3.0, gt=0)
    turnover_max: float = Field(default=5.0, gt=0)

    @model_validator(mode="after")
    def _ordered(self) -> EquipmentConfig:
        if self.turnover_min > self.turnover_max:
            msg = "turnover_min must not exceed turnover_max"
            raise ValueError(msg)
        return self


class SearchConfig(BaseModel):
    """[search] section. Dimensions are in inches."""

    model_config = {"frozen": True}

    min_dimension: float = Field(default=10.0, gt=0)
    max_dimension: float = Field(default=120.0, gt=0)
    max_height: float = Field(default=60.0, gt=0)
    tolerance: float = Field(default=0.10, gt=0, le=1)
    max_results: int = Field(default=10, ge=1)
    preset_tolerance: float = Field(default=0.20, gt=0, le=1)
    include_presets: bool = True

    @model_validator(mode="after")
    def _ordered(self) -> SearchConfig:
        if self.min_dimension > self.max_dimension:
            msg = "min_dimension must not exceed max_dimension"
            raise ValueError(msg)
        return self


class ResizeConfig(BaseModel):
    """[resize] section. Clamp bounds in inches."""

    model_config = {"frozen": True}

    min_inches: float = Field(default=10.0, gt=0)
    max_inches: float = Field(default=120.0, gt=0)

    @model_validator(mode="after")
    def _ordered(self) -> ResizeConfig:
        if self.min_inches > self.max_inches:
            msg = "min_inches must not exceed max_inches"
            raise ValueError(msg)
        return self


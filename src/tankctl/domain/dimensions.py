"""Dimensions value object.

INVARIANT: all three axes are strictly positive and finite. The
calculators themselves accept raw floats and never validate; this model
is the boundary check used by the service layer.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Dimensions(BaseModel):
    """A tank's outer dimensions in a single linear unit.

    ``length`` and ``width`` are the horizontal axes (front panel and
    side panel); ``height`` is the water depth.
    """

    model_config = {"frozen": True}

    length: float = Field(gt=0, allow_inf_nan=False)
    width: float = Field(gt=0, allow_inf_nan=False)
    height: float = Field(gt=0, allow_inf_nan=False)

    @property
    def span(self) -> float:
        """Longest horizontal panel."""
        return max(self.length, self.width)

    @property
    def depth(self) -> float:
        return self.height

    def as_tuple(self) -> tuple[float, float, float]:
        return self.length, self.width, self.height

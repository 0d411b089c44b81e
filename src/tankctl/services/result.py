"""ServiceResult and ServiceError — the contract every service returns.

INVARIANT: All public service methods return ServiceResult, including
on invalid caller input. The CLI consumes this type; nothing above the
service layer catches domain exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"calculate"``).
        data: Operation-specific payload on success.
        warnings: Advisory conditions (clamped resize, empty search).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry span tree when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

"""Telemetry primitives — Span, @traced, trace_span.

Service operations are cheap, so telemetry is only collected under
``--verbose``. A traced call opens a root span; ``trace_span`` stages
nested inside it (``grid``, ``scale``, the report sections) hang off it
as children. When the call returns a ServiceResult, the finished tree is
copied into ``meta["telemetry"]`` and logged at debug level.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from tankctl.services.result import ServiceResult

log = structlog.get_logger("tankctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("tankctl_telemetry_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("tankctl_current_span", default=None)


@dataclass
class Span:
    """One timed stage of a service call."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        """Elapsed milliseconds, or 0.0 while the span is still open."""
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def child(self, name: str) -> Span:
        span = Span(name=name, parent=self)
        self.children.append(span)
        return span

    def to_dict(self) -> dict[str, Any]:
        """Serializable tree; empty annotations and children are omitted."""
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [c.to_dict() for c in self.children]
        return tree


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    """Make *span* current until the block exits, then close it."""
    token = _current_span.set(span)
    try:
        yield span
    finally:
        if span.finished is None:
            span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a stage inside the active @traced call.

    Yields None outside a traced call or when telemetry is off, so
    callers guard annotations with ``if span:``.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    with _activate(parent.child(name)) as span:
        yield span


def _log_finished(span: Span, result: object) -> None:
    fields: dict[str, Any] = {
        "span_name": span.name,
        "duration_ms": round(span.duration_ms, 2),
        "stages": [c.name for c in span.children],
    }
    if isinstance(result, ServiceResult):
        fields["ok"] = result.ok
        if result.error is not None:
            fields["error_code"] = result.error.code
    log.debug("span.complete", **fields)


def _with_telemetry(result: ServiceResult, span: Span) -> ServiceResult:
    meta = {**(result.meta or {}), "telemetry": span.to_dict()}
    return result.model_copy(update={"meta": meta})


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the result.

    Exceptions propagate untouched; the span is still closed and logged.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        result: Any = None
        with _activate(Span(name=func.__qualname__)) as span:
            try:
                result = func(*args, **kwargs)
            finally:
                span.end()
                _log_finished(span, result)

        if isinstance(result, ServiceResult):
            return _with_telemetry(result, span)  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on span collection for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The innermost open span, if telemetry is on."""
    return _current_span.get() if _enabled.get() else None

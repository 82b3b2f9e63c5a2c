"""Verbose-mode timing for extraction calls.

A ``@traced`` service method opens a :class:`Trace`; the domain's
per-entity callback feeds :func:`record_entity`, which closes one child
span per entity. The finished tree lands in ``ServiceResult.meta["telemetry"]``.
Disabled (the default), each call costs one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from scoreslice.services.result import ServiceResult

log = structlog.get_logger("scoreslice.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_active: ContextVar[Trace | None] = ContextVar("_active", default=None)


def _elapsed_ms(since: float, until: float) -> float:
    return round((until - since) * 1000, 2)


@dataclass
class Trace:
    """Timing of one service call, split into per-entity spans."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    children: list[dict[str, Any]] = field(default_factory=list)
    _mark: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self._mark = self.started

    def record_entity(self, name: str, records: int) -> None:
        """Close a span covering the time since the previous entity."""
        now = time.perf_counter()
        self.children.append(
            {
                "name": name,
                "duration_ms": _elapsed_ms(self._mark, now),
                "annotations": {"records": records},
            }
        )
        self._mark = now

    def finish(self) -> None:
        self.finished = time.perf_counter()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "duration_ms": _elapsed_ms(self.started, self.finished or self.started),
        }
        if self.children:
            result["children"] = list(self.children)
        return result


def record_entity(name: str, records: int) -> None:
    """Add an entity span to the active trace; no-op outside one."""
    trace = _active.get()
    if trace is not None:
        trace.record_entity(name, records)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Time a service method and attach the trace to its ServiceResult.meta."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        trace = Trace(name=func.__qualname__)
        token = _active.set(trace)
        try:
            result = func(*args, **kwargs)
        finally:
            trace.finish()
            _active.reset(token)

        log.debug(
            "trace.complete",
            trace_name=trace.name,
            duration_ms=trace.to_dict()["duration_ms"],
            entities=len(trace.children),
        )
        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": trace.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on tracing for this context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)

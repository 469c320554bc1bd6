"""Stage timings for service calls.

With ``--verbose`` each ``@timed`` service call measures the stages it
runs (decoding, acceptance rules, schema generation, file writes) and
attaches them to ``ServiceResult.meta["timings"]``:

    {"total_ms": 4.1, "stages": {"decode": 3.2, "acceptance_rules": 0.1}}

Outside verbose mode :func:`stage` costs one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from cw20kit.services.result import ServiceResult

if TYPE_CHECKING:
    from cw20kit.services.base import BaseService

_active: ContextVar[StageTimings | None] = ContextVar("_active_timings", default=None)


def _elapsed_ms(since: float) -> float:
    return (time.perf_counter() - since) * 1000


@dataclass
class StageTimings:
    """Wall-clock milliseconds per named stage of one service call."""

    started: float = field(default_factory=time.perf_counter)
    stages: dict[str, float] = field(default_factory=dict)
    total_ms: float | None = None

    def record(self, name: str, ms: float) -> None:
        # A stage entered twice (e.g. one write per file) accumulates.
        self.stages[name] = self.stages.get(name, 0.0) + ms

    def finish(self) -> None:
        self.total_ms = _elapsed_ms(self.started)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_ms or 0.0, 2),
            "stages": {name: round(ms, 2) for name, ms in self.stages.items()},
        }


@contextmanager
def stage(name: str) -> Iterator[None]:
    """Time the enclosed block as *name* when a timed call is active."""
    timings = _active.get()
    if timings is None:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        timings.record(name, _elapsed_ms(start))


def timed(method: Callable[..., ServiceResult]) -> Callable[..., ServiceResult]:
    """Record stage timings for a service method when settings are verbose."""

    @functools.wraps(method)
    def wrapper(self: BaseService, *args: Any, **kwargs: Any) -> ServiceResult:
        if not self._settings.verbose:
            return method(self, *args, **kwargs)

        timings = StageTimings()
        token = _active.set(timings)
        try:
            result = method(self, *args, **kwargs)
        finally:
            _active.reset(token)
            timings.finish()

        summary = timings.to_dict()
        structlog.get_logger("cw20kit.timings").debug(
            "service.timed", op=result.op, ok=result.ok, **summary
        )
        return result.model_copy(update={"meta": {**(result.meta or {}), "timings": summary}})

    return wrapper

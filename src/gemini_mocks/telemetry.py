"""Telemetry scopes for generation calls.

``TelemetryContext(*reporters)`` returns a shared no-op context unless
``GEMINI_MOCKS_TELEMETRY=1`` (or ``DEBUG=1``) is set and a reporter is given.
Scopes nest: a ``generate.execute`` scope opened inside ``studio`` is reported
as ``studio.generate.execute``.
"""

from collections import defaultdict, deque
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
import logging
import os
import time
from typing import Any, Protocol, Self, runtime_checkable

log = logging.getLogger(__name__)

_open_scopes: ContextVar[tuple[str, ...]] = ContextVar(
    "gemini_mocks_open_scopes", default=()
)


def telemetry_enabled() -> bool:
    """Whether scopes should be recorded, read from the environment."""
    return os.getenv("GEMINI_MOCKS_TELEMETRY") == "1" or os.getenv("DEBUG") == "1"


@runtime_checkable
class TelemetryReporter(Protocol):
    """Receives scope durations and metric values."""

    def record_timing(self, scope: str, duration: float, **metadata: Any) -> None: ...  # noqa: D102
    def record_metric(self, scope: str, value: Any, **metadata: Any) -> None: ...  # noqa: D102


class _SilentContext:
    """Accepts every call and records nothing."""

    __slots__ = ()

    def __call__(self, name: str, **metadata: Any) -> Self:  # noqa: ARG002
        return self

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def metric(self, name: str, value: Any, **metadata: Any) -> None:
        pass

    def count(self, name: str, increment: int = 1, **metadata: Any) -> None:
        pass


class _RecordingContext:
    """Times scopes and forwards metrics to reporters."""

    __slots__ = ("reporters",)

    def __init__(self, *reporters: TelemetryReporter) -> None:
        self.reporters = reporters

    @contextmanager
    def __call__(self, name: str, **metadata: Any) -> Iterator[Self]:
        if not name or not isinstance(name, str):
            raise ValueError("Scope name must be a non-empty string")
        parents = _open_scopes.get()
        token = _open_scopes.set((*parents, name))
        started = time.perf_counter()
        try:
            yield self
        finally:
            elapsed = time.perf_counter() - started
            _open_scopes.reset(token)
            self._emit(
                "record_timing",
                ".".join((*parents, name)),
                elapsed,
                depth=len(parents),
                parent_scope=".".join(parents) or None,
                **metadata,
            )

    def metric(self, name: str, value: Any, **metadata: Any) -> None:
        """Record ``value`` under the innermost open scope."""
        scope = ".".join((*_open_scopes.get(), name))
        self._emit("record_metric", scope, value, **metadata)

    def count(self, name: str, increment: int = 1, **metadata: Any) -> None:
        self.metric(name, increment, metric_type="counter", **metadata)

    def _emit(self, method: str, scope: str, value: Any, **metadata: Any) -> None:
        for reporter in self.reporters:
            try:
                getattr(reporter, method)(scope, value, **metadata)
            except Exception:
                # Reporter failures never reach the caller
                log.exception("Telemetry reporter %s failed", type(reporter).__name__)


_SILENT = _SilentContext()

type TelemetryContextProtocol = _RecordingContext | _SilentContext


def TelemetryContext(*reporters: TelemetryReporter) -> TelemetryContextProtocol:  # noqa: N802
    """Return a recording context, or the shared silent one when disabled."""
    if reporters and telemetry_enabled():
        return _RecordingContext(*reporters)
    return _SILENT


class InMemoryReporter:
    """Keeps the most recent timings and metrics for each scope."""

    def __init__(self, max_entries_per_scope: int = 1000) -> None:
        self.timings: defaultdict[str, deque[tuple[float, dict[str, Any]]]] = (
            defaultdict(lambda: deque(maxlen=max_entries_per_scope))
        )
        self.metrics: defaultdict[str, deque[tuple[Any, dict[str, Any]]]] = (
            defaultdict(lambda: deque(maxlen=max_entries_per_scope))
        )

    def record_timing(self, scope: str, duration: float, **metadata: Any) -> None:
        self.timings[scope].append((duration, metadata))

    def record_metric(self, scope: str, value: Any, **metadata: Any) -> None:
        self.metrics[scope].append((value, metadata))

    def get_report(self) -> str:
        """Per-scope call counts and durations, then metric totals."""
        lines = ["Scope timings:"]
        for scope in sorted(self.timings):
            durations = [d for d, _ in self.timings[scope]]
            lines.append(
                f"  {scope}: {len(durations)} call(s), "
                f"{sum(durations):.4f}s total, "
                f"{sum(durations) / len(durations):.4f}s avg"
            )
        if self.metrics:
            lines.append("Metrics:")
            for scope in sorted(self.metrics):
                values = [v for v, _ in self.metrics[scope]]
                total = sum(v for v in values if isinstance(v, int | float))
                lines.append(f"  {scope}: {len(values)} sample(s), total {total:g}")
        return "\n".join(lines)

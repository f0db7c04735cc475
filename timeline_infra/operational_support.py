from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterable, Iterator

from timeline_core.domain.task import Task
from timeline_core.services.scheduling import ScheduleAnalyzer
from timeline_core.services.scheduling.models import ScheduleAnalysis

_TRACE_ID_CTX: ContextVar[str | None] = ContextVar("pm_trace_id", default=None)


def create_trace_id() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"run-{stamp}-{uuid.uuid4().hex[:8]}"


def current_trace_id() -> str | None:
    value = _TRACE_ID_CTX.get()
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


@contextmanager
def bind_trace_id(trace_id: str | None) -> Iterator[str]:
    normalized = (trace_id or "").strip() or create_trace_id()
    token = _TRACE_ID_CTX.set(normalized)
    try:
        yield normalized
    finally:
        _TRACE_ID_CTX.reset(token)


class TraceIdLogFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


def run_traced_analysis(
    analyzer: ScheduleAnalyzer,
    tasks: Iterable[Task],
    trace_id: str | None = None,
) -> tuple[str, ScheduleAnalysis]:
    """Run one analysis with every log line it emits tagged by a trace id."""
    with bind_trace_id(trace_id) as bound:
        return bound, analyzer.analyze(tasks)


__all__ = [
    "TraceIdLogFilter",
    "bind_trace_id",
    "create_trace_id",
    "current_trace_id",
    "run_traced_analysis",
]

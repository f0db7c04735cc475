from timeline_core.domain import (
    DEFAULT_MILESTONE_KINDS,
    Task,
    TaskKind,
    Timestamp,
    as_naive_utc,
    normalize_kind,
)

__all__ = [
    "TaskKind",
    "DEFAULT_MILESTONE_KINDS",
    "normalize_kind",
    "Task",
    "Timestamp",
    "as_naive_utc",
]

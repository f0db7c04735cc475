from timeline_core.domain.enums import DEFAULT_MILESTONE_KINDS, TaskKind, normalize_kind
from timeline_core.domain.task import Task, Timestamp, as_naive_utc

__all__ = [
    "TaskKind",
    "DEFAULT_MILESTONE_KINDS",
    "normalize_kind",
    "Task",
    "Timestamp",
    "as_naive_utc",
]

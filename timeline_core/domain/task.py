from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from timeline_core.domain.enums import TaskKind

Timestamp = Union[datetime, date]


def as_naive_utc(value: Timestamp) -> datetime:
    """
    Put dates and datetimes on one comparable axis:
    - date -> midnight of that day
    - aware datetime -> converted to UTC, tzinfo dropped
    - naive datetime -> unchanged
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


@dataclass(frozen=True)
class Task:
    id: str
    title: str = ""
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None
    weight: float = 0.0
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    completed_effort: float = 0.0
    planned_effort: float = 0.0
    is_done: bool = False
    kind: TaskKind | str = TaskKind.TASK

    def __post_init__(self) -> None:
        deps = self.dependencies
        if isinstance(deps, str):
            # a bare string is one id, not a sequence of one-letter ids
            deps = (deps,) if deps else ()
        elif not isinstance(deps, tuple):
            deps = tuple(deps or ())
        object.__setattr__(self, "dependencies", deps)

    @property
    def has_window(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    @property
    def duration(self) -> timedelta:
        """Length of the task window; reversed or missing windows count as zero."""
        if not self.has_window:
            return timedelta(0)
        span = as_naive_utc(self.end_date) - as_naive_utc(self.start_date)
        return max(span, timedelta(0))


__all__ = ["Task", "Timestamp", "as_naive_utc"]

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional

from timeline_core.domain.task import Task, Timestamp

DONE_STATUSES = frozenset({"done"})


def _pick(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def parse_timestamp(value: Any) -> Optional[Timestamp]:
    """
    Accepts date/datetime objects or ISO-8601 strings.
    Anything unparseable -> None.
    """
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def task_from_work_item(record: Mapping[str, Any]) -> Task:
    """
    Backlog work item -> Task.

    The item's creation time opens the window and its due date closes it.
    The estimate is both the graph weight and the planned effort; logged
    actual time is the completed effort.
    """
    estimate = _number(_pick(record, "estimate"))
    status = str(_pick(record, "status", default="") or "")
    dependencies = _pick(record, "dependencies", default=()) or ()

    return Task(
        id=str(record["id"]),
        title=str(_pick(record, "title", default="") or ""),
        start_date=parse_timestamp(_pick(record, "createdAt", "created_at")),
        end_date=parse_timestamp(_pick(record, "dueDate", "due_date")),
        weight=estimate,
        dependencies=tuple(str(dep) for dep in dependencies),
        completed_effort=_number(_pick(record, "actualTime", "actual_time")),
        planned_effort=estimate,
        is_done=status.strip().lower() in DONE_STATUSES,
        kind=str(_pick(record, "type", default="task")),
    )


def tasks_from_work_items(records: Iterable[Mapping[str, Any]]) -> List[Task]:
    return [task_from_work_item(record) for record in records]


__all__ = ["task_from_work_item", "tasks_from_work_items", "parse_timestamp", "DONE_STATUSES"]

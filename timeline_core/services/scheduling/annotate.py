from __future__ import annotations

from datetime import datetime
from typing import AbstractSet, Iterable, List

from timeline_core.domain.enums import DEFAULT_MILESTONE_KINDS, normalize_kind
from timeline_core.domain.task import Task, as_naive_utc
from timeline_core.services.scheduling.graph import latest_by_id, normalize_weight
from timeline_core.services.scheduling.models import (
    AnnotatedTask,
    CriticalPathResult,
    TaskNetwork,
)


def progress_percent(task: Task) -> float:
    if task.is_done:
        return 100.0
    planned = normalize_weight(task.planned_effort)
    if planned <= 0:
        return 0.0
    completed = normalize_weight(task.completed_effort)
    return min(100.0, completed / planned * 100.0)


def is_milestone(task: Task, milestone_kinds: AbstractSet[str] = DEFAULT_MILESTONE_KINDS) -> bool:
    if normalize_weight(task.weight) == 0:
        return True
    return normalize_kind(task.kind) in milestone_kinds


def _timeline_key(row: AnnotatedTask) -> tuple[bool, datetime]:
    start = row.start_date
    if start is None:
        return True, datetime.max
    return False, as_naive_utc(start)


def annotate_tasks(
    tasks: Iterable[Task],
    network: TaskNetwork,
    critical_path: CriticalPathResult,
    milestone_kinds: AbstractSet[str] = DEFAULT_MILESTONE_KINDS,
) -> List[AnnotatedTask]:
    """
    One row per distinct task id, ordered by start date.

    Tasks without a window never entered the network; they still get
    progress and milestone flags but are never on the critical path.
    Rows without a start date sort last. Ties keep input order.
    """
    kinds = {normalize_kind(kind) for kind in milestone_kinds}
    on_path = set(critical_path.path)

    rows = [
        AnnotatedTask(
            task=task,
            progress_percent=progress_percent(task),
            is_milestone=is_milestone(task, kinds),
            is_on_critical_path=task_id in on_path,
            in_network=task_id in network,
        )
        for task_id, task in latest_by_id(tasks).items()
    ]
    rows.sort(key=_timeline_key)
    return rows


__all__ = ["annotate_tasks", "progress_percent", "is_milestone"]

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, List, Optional

from timeline_core.domain.enums import DEFAULT_MILESTONE_KINDS
from timeline_core.domain.task import Task, Timestamp


@dataclass(frozen=True)
class AnalysisOptions:
    strict: bool = False
    milestone_kinds: frozenset[str] = DEFAULT_MILESTONE_KINDS


@dataclass(frozen=True)
class TaskNetwork:
    nodes: Dict[str, Task]
    forward_edges: Dict[str, List[str]]
    in_degree: Dict[str, int]
    weights: Dict[str, float]

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(succ) for succ in self.forward_edges.values())


@dataclass(frozen=True)
class CriticalPathResult:
    """
    Longest weighted chain through the task network.

    ``duration`` is denominated in the same effort units as ``Task.weight``
    (an estimate), not in elapsed calendar days.
    """

    path: tuple[str, ...] = ()
    duration: float = 0
    distances: Dict[str, float] = field(default_factory=dict)
    unresolved_task_ids: tuple[str, ...] = ()

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.path


@dataclass(frozen=True)
class AnnotatedTask:
    task: Task
    progress_percent: float
    is_milestone: bool
    is_on_critical_path: bool
    in_network: bool

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def title(self) -> str:
        return self.task.title

    @property
    def start_date(self) -> Optional[Timestamp]:
        return self.task.start_date

    @property
    def end_date(self) -> Optional[Timestamp]:
        return self.task.end_date

    @property
    def duration(self) -> timedelta:
        return self.task.duration


@dataclass(frozen=True)
class ScheduleAnalysis:
    tasks: List[AnnotatedTask]
    critical_path: CriticalPathResult
    network: TaskNetwork

    @property
    def has_critical_path(self) -> bool:
        return bool(self.critical_path.path)

    @property
    def critical_tasks(self) -> List[AnnotatedTask]:
        by_id = {row.id: row for row in self.tasks}
        return [by_id[task_id] for task_id in self.critical_path.path if task_id in by_id]

    @property
    def milestones(self) -> List[AnnotatedTask]:
        return [row for row in self.tasks if row.is_milestone]

    @property
    def excluded_task_ids(self) -> List[str]:
        return [row.id for row in self.tasks if not row.in_network]

    @property
    def unresolved_task_ids(self) -> List[str]:
        """Tasks on, or downstream of, a dependency cycle."""
        return list(self.critical_path.unresolved_task_ids)


__all__ = [
    "AnalysisOptions",
    "TaskNetwork",
    "CriticalPathResult",
    "AnnotatedTask",
    "ScheduleAnalysis",
]

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List

from timeline_core.domain.task import Task
from timeline_core.services.scheduling.models import TaskNetwork

logger = logging.getLogger(__name__)


def normalize_weight(value: object) -> float:
    """Missing, negative, non-numeric or non-finite weights count as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        weight = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(weight) or weight < 0:
        return 0.0
    return weight


def latest_by_id(tasks: Iterable[Task]) -> Dict[str, Task]:
    """
    Collapse duplicate ids: the later record wins, the id keeps the
    position of its first occurrence.
    """
    tasks_by_id: Dict[str, Task] = {}
    for task in tasks:
        tasks_by_id[task.id] = task
    return tasks_by_id


def build_task_network(tasks: Iterable[Task]) -> TaskNetwork:
    tasks_by_id = {
        task_id: task
        for task_id, task in latest_by_id(tasks).items()
        if task.has_window
    }

    forward_edges: Dict[str, List[str]] = {task_id: [] for task_id in tasks_by_id}
    in_degree: Dict[str, int] = {task_id: 0 for task_id in tasks_by_id}
    weights: Dict[str, float] = {
        task_id: normalize_weight(task.weight) for task_id, task in tasks_by_id.items()
    }

    dropped = 0
    for task_id, task in tasks_by_id.items():
        # dependencies are a set; repeated ids collapse to one edge
        for dep_id in dict.fromkeys(task.dependencies):
            if dep_id not in tasks_by_id:
                dropped += 1
                continue
            forward_edges[dep_id].append(task_id)
            in_degree[task_id] += 1

    if dropped:
        logger.debug("Dropped %s dependency reference(s) to tasks outside the network", dropped)

    return TaskNetwork(
        nodes=tasks_by_id,
        forward_edges=forward_edges,
        in_degree=in_degree,
        weights=weights,
    )


__all__ = ["build_task_network", "latest_by_id", "normalize_weight"]

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from timeline_core.domain.task import Task
from timeline_core.exceptions import CycleDetectedError, DuplicateIdError, UnknownDependencyError
from timeline_core.services.scheduling.models import CriticalPathResult, TaskNetwork


def validate_task_batch(tasks: Sequence[Task]) -> None:
    """
    Strict pre-checks on a raw batch:
    - every id appears once
    - every dependency names a task of the batch

    Dependencies on tasks without a window are allowed; those tasks are
    simply left out of the network.
    """
    seen: set[str] = set()
    for task in tasks:
        if task.id in seen:
            raise DuplicateIdError(task.id)
        seen.add(task.id)

    for task in tasks:
        for dep_id in task.dependencies:
            if dep_id not in seen:
                raise UnknownDependencyError(task.id, dep_id)


def find_cycle(network: TaskNetwork, unresolved: Iterable[str]) -> List[str] | None:
    """
    Return one cycle among the unresolved tasks as ``[a, b, ..., a]``.

    Every unresolved task has at least one unresolved predecessor, so
    walking predecessors from any of them must revisit a task.
    """
    pending = set(unresolved)
    if not pending:
        return None

    preds: Dict[str, List[str]] = {}
    for pred_id, successors in network.forward_edges.items():
        if pred_id not in pending:
            continue
        for succ_id in successors:
            if succ_id in pending:
                preds.setdefault(succ_id, []).append(pred_id)

    start = next(task_id for task_id in network.nodes if task_id in pending)
    walk: List[str] = [start]
    position: Dict[str, int] = {start: 0}
    node = start
    while True:
        node = preds[node][0]
        if node in position:
            loop = walk[position[node]:]
            # walk runs against the edges; report it in dependency order
            loop.reverse()
            return [node, *loop]
        position[node] = len(walk)
        walk.append(node)


def ensure_acyclic(network: TaskNetwork, critical_path: CriticalPathResult) -> None:
    cycle = find_cycle(network, critical_path.unresolved_task_ids)
    if cycle:
        raise CycleDetectedError(cycle)


__all__ = ["validate_task_batch", "find_cycle", "ensure_acyclic"]

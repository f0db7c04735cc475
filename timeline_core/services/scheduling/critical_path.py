from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional

from timeline_core.services.scheduling.models import CriticalPathResult, TaskNetwork

logger = logging.getLogger(__name__)


def compute_critical_path(network: TaskNetwork) -> CriticalPathResult:
    """
    Longest weighted path over the network (Kahn-style topological pass).

    - Sources are seeded in node order with their own weight.
    - A successor's distance only moves on a strictly greater candidate, so
      the first chain to reach a given length keeps it.
    - Tasks whose in-degree never drops to 0 (cycles and everything behind
      them) are never processed and get no distance.
    - The terminal is the first processed task holding the largest distance,
      even when that distance is 0. A network of zero-weight milestones
      therefore yields a one-task path, not the empty path a search seeded
      at 0 with a strict comparison would return.
    """
    if not network.nodes:
        return CriticalPathResult()

    remaining: Dict[str, int] = dict(network.in_degree)
    distance: Dict[str, float] = {}
    predecessor: Dict[str, str] = {}

    queue: deque[str] = deque()
    for task_id, degree in remaining.items():
        if degree == 0:
            queue.append(task_id)
            distance[task_id] = network.weights[task_id]

    processed: set[str] = set()
    while queue:
        task_id = queue.popleft()
        processed.add(task_id)
        current = distance[task_id]
        for succ_id in network.forward_edges.get(task_id, []):
            candidate = current + network.weights[succ_id]
            if succ_id not in distance or candidate > distance[succ_id]:
                distance[succ_id] = candidate
                predecessor[succ_id] = task_id
            remaining[succ_id] -= 1
            if remaining[succ_id] == 0:
                queue.append(succ_id)

    resolved = {task_id: dist for task_id, dist in distance.items() if task_id in processed}
    unresolved = tuple(task_id for task_id in network.nodes if task_id not in processed)
    if unresolved:
        logger.debug(
            "Excluded %s task(s) behind a dependency cycle from the critical path: %s",
            len(unresolved),
            ", ".join(unresolved),
        )

    terminal: Optional[str] = None
    best = 0.0
    for task_id, dist in resolved.items():
        if terminal is None or dist > best:
            terminal = task_id
            best = dist

    if terminal is None:
        return CriticalPathResult(unresolved_task_ids=unresolved)

    path: List[str] = []
    node: Optional[str] = terminal
    while node is not None:
        path.append(node)
        node = predecessor.get(node)
    path.reverse()

    return CriticalPathResult(
        path=tuple(path),
        duration=best,
        distances=resolved,
        unresolved_task_ids=unresolved,
    )


__all__ = ["compute_critical_path"]

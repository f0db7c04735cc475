# timeline_core/services/scheduling/engine.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from timeline_core.domain.task import Task
from timeline_core.exceptions import DomainError
from timeline_core.services.scheduling.annotate import annotate_tasks
from timeline_core.services.scheduling.critical_path import compute_critical_path
from timeline_core.services.scheduling.graph import build_task_network
from timeline_core.services.scheduling.models import AnalysisOptions, ScheduleAnalysis
from timeline_core.services.scheduling.validation import ensure_acyclic, validate_task_batch

logger = logging.getLogger(__name__)


class ScheduleAnalyzer:
    """
    Dependency-aware schedule analysis over a snapshot of tasks:
    - builds the predecessor -> successor network
    - finds the critical path (longest chain by weight)
    - annotates every task with progress, milestone and critical-path flags

    Holds no state between calls; every analysis builds its own structures.
    """

    def __init__(self, options: Optional[AnalysisOptions] = None):
        self._options: AnalysisOptions = options or AnalysisOptions()

    @property
    def options(self) -> AnalysisOptions:
        return self._options

    def analyze(self, tasks: Iterable[Task], strict: Optional[bool] = None) -> ScheduleAnalysis:
        """
        Full analysis of one task batch.

        ``strict`` overrides the configured mode for this call. Tolerant mode
        never raises for malformed input; strict mode raises
        DuplicateIdError, UnknownDependencyError or CycleDetectedError.
        """
        batch = list(tasks)
        is_strict = self._options.strict if strict is None else strict

        try:
            if is_strict:
                validate_task_batch(batch)

            network = build_task_network(batch)
            critical_path = compute_critical_path(network)

            if is_strict:
                ensure_acyclic(network, critical_path)
        except DomainError as exc:
            logger.warning("Schedule analysis rejected [%s]: %s", exc.code, exc)
            raise

        annotated = annotate_tasks(
            batch,
            network,
            critical_path,
            milestone_kinds=self._options.milestone_kinds,
        )

        logger.info(
            "Analyzed schedule: %s task(s), %s in network, critical path %s task(s), duration %s",
            len(annotated),
            len(network),
            len(critical_path.path),
            critical_path.duration,
        )
        return ScheduleAnalysis(tasks=annotated, critical_path=critical_path, network=network)


def analyze_schedule(
    tasks: Iterable[Task],
    options: Optional[AnalysisOptions] = None,
) -> ScheduleAnalysis:
    return ScheduleAnalyzer(options).analyze(tasks)


__all__ = ["ScheduleAnalyzer", "analyze_schedule"]

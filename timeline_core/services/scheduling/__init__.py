from .engine import ScheduleAnalyzer, analyze_schedule
from .annotate import annotate_tasks, is_milestone, progress_percent
from .critical_path import compute_critical_path
from .graph import build_task_network
from .models import (
    AnalysisOptions,
    AnnotatedTask,
    CriticalPathResult,
    ScheduleAnalysis,
    TaskNetwork,
)
from .validation import find_cycle, validate_task_batch
from .work_items import task_from_work_item, tasks_from_work_items

__all__ = [
    "ScheduleAnalyzer",
    "analyze_schedule",
    "AnalysisOptions",
    "AnnotatedTask",
    "CriticalPathResult",
    "ScheduleAnalysis",
    "TaskNetwork",
    "annotate_tasks",
    "build_task_network",
    "compute_critical_path",
    "find_cycle",
    "is_milestone",
    "progress_percent",
    "task_from_work_item",
    "tasks_from_work_items",
    "validate_task_batch",
]

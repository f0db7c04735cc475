# tests/conftest.py
from datetime import date, timedelta

import pytest

from timeline_core.models import Task
from timeline_core.services.scheduling import AnalysisOptions, ScheduleAnalyzer

BASE_DAY = date(2023, 11, 6)


@pytest.fixture
def make_task():
    """
    Build a windowed Task; offset/length are in days from BASE_DAY.
    Pass start_date/end_date explicitly to override (None drops the window).
    """

    def _make(task_id: str, weight: float = 1, deps=(), offset: int = 0, length: int = 1, **extra):
        extra.setdefault("title", f"Task {task_id}")
        extra.setdefault("start_date", BASE_DAY + timedelta(days=offset))
        extra.setdefault("end_date", BASE_DAY + timedelta(days=offset + length))
        return Task(
            id=task_id,
            weight=weight,
            dependencies=deps,
            **extra,
        )

    return _make


@pytest.fixture
def analyzer():
    return ScheduleAnalyzer()


@pytest.fixture
def strict_analyzer():
    return ScheduleAnalyzer(AnalysisOptions(strict=True))

from datetime import date, datetime, timezone

import pytest

from timeline_core.models import Task, TaskKind
from timeline_core.services.scheduling import (
    annotate_tasks,
    build_task_network,
    compute_critical_path,
    is_milestone,
    progress_percent,
)


def _annotate(tasks, **kwargs):
    network = build_task_network(tasks)
    return annotate_tasks(tasks, network, compute_critical_path(network), **kwargs)


@pytest.mark.parametrize(
    "extra, expected",
    [
        ({"is_done": True, "completed_effort": 1, "planned_effort": 10}, 100.0),
        ({"completed_effort": 3, "planned_effort": 4}, 75.0),
        ({"completed_effort": 12, "planned_effort": 4}, 100.0),
        ({"completed_effort": 3, "planned_effort": 0}, 0.0),
        ({"completed_effort": -2, "planned_effort": 4}, 0.0),
    ],
)
def test_progress_percent_rules(extra, expected):
    assert progress_percent(Task(id="T", **extra)) == pytest.approx(expected)


def test_zero_weight_task_is_milestone_wherever_it_sits(make_task):
    tasks = [
        make_task("A", weight=3),
        make_task("Gate", weight=0, deps=["A"]),
        make_task("B", weight=2, deps=["Gate"]),
    ]
    rows = {row.id: row for row in _annotate(tasks)}
    assert rows["Gate"].is_milestone is True
    assert rows["A"].is_milestone is False
    assert rows["B"].is_milestone is False


def test_epic_and_milestone_kinds_are_milestones():
    assert is_milestone(Task(id="E", weight=8, kind=TaskKind.EPIC)) is True
    assert is_milestone(Task(id="M", weight=8, kind=" Milestone ")) is True
    assert is_milestone(Task(id="S", weight=8, kind=TaskKind.STORY)) is False


def test_custom_milestone_kinds(make_task):
    tasks = [make_task("R", weight=5, kind="release"), make_task("E", weight=5, kind=TaskKind.EPIC)]
    rows = {row.id: row for row in _annotate(tasks, milestone_kinds={"Release"})}
    assert rows["R"].is_milestone is True
    assert rows["E"].is_milestone is False


def test_critical_path_flags(make_task):
    tasks = [
        make_task("A", weight=1),
        make_task("B", weight=5, deps=["A"]),
        make_task("C", weight=2, deps=["A"]),
        make_task("D", weight=1, deps=["B", "C"]),
    ]
    flags = {row.id: row.is_on_critical_path for row in _annotate(tasks)}
    assert flags == {"A": True, "B": True, "C": False, "D": True}


def test_tasks_outside_network_are_still_annotated(make_task):
    floating = make_task(
        "F",
        weight=0,
        start_date=None,
        end_date=None,
        completed_effort=1,
        planned_effort=2,
    )
    rows = _annotate([make_task("A", weight=4), floating])

    row = next(r for r in rows if r.id == "F")
    assert row.in_network is False
    assert row.is_on_critical_path is False
    assert row.is_milestone is True
    assert row.progress_percent == pytest.approx(50.0)


def test_rows_are_ordered_by_start_then_input_order(make_task):
    tasks = [
        make_task("Late", offset=5),
        make_task("Undated", start_date=None),
        make_task("Early", offset=0),
        make_task("AlsoEarly", offset=0),
        make_task("Middle", start_date=datetime(2023, 11, 8, 9, 30, tzinfo=timezone.utc)),
    ]
    assert [row.id for row in _annotate(tasks)] == [
        "Early",
        "AlsoEarly",
        "Middle",
        "Late",
        "Undated",
    ]


def test_duplicate_ids_produce_one_row(make_task):
    tasks = [make_task("A", weight=1), make_task("A", weight=6, title="Replacement")]
    rows = _annotate(tasks)
    assert len(rows) == 1
    assert rows[0].title == "Replacement"
    assert rows[0].is_on_critical_path is True


def test_annotated_row_exposes_task_fields(make_task):
    task = make_task("A", start_date=date(2023, 11, 6), end_date=date(2023, 11, 9))
    row = _annotate([task])[0]
    assert row.task is task
    assert row.start_date == date(2023, 11, 6)
    assert row.end_date == date(2023, 11, 9)
    assert row.duration.days == 3


def test_empty_input_gives_empty_rows():
    assert _annotate([]) == []

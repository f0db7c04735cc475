from __future__ import annotations

from enum import Enum


class TaskKind(str, Enum):
    STORY = "story"
    TASK = "task"
    BUG = "bug"
    EPIC = "epic"
    MILESTONE = "milestone"


DEFAULT_MILESTONE_KINDS = frozenset({TaskKind.EPIC.value, TaskKind.MILESTONE.value})


def normalize_kind(value: object) -> str:
    """
    Lower-case string form of a task kind.
    Supports:
    - enum with .value
    - plain string (any case, surrounding spaces ignored)
    Unknown/missing -> ""
    """
    if value is None:
        return ""
    if hasattr(value, "value"):
        value = value.value
    return str(value).strip().lower()


__all__ = ["TaskKind", "DEFAULT_MILESTONE_KINDS", "normalize_kind"]

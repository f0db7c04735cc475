from __future__ import annotations

import os

from timeline_core.domain.enums import DEFAULT_MILESTONE_KINDS, normalize_kind
from timeline_core.services.scheduling import AnalysisOptions, ScheduleAnalyzer


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: frozenset[str]) -> frozenset[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    values = {normalize_kind(part) for part in raw.split(",")}
    values.discard("")
    return frozenset(values) or default


def load_analysis_options() -> AnalysisOptions:
    return AnalysisOptions(
        strict=_env_flag("PM_SCHEDULE_STRICT", False),
        milestone_kinds=_env_list("PM_SCHEDULE_MILESTONE_KINDS", DEFAULT_MILESTONE_KINDS),
    )


def build_analyzer() -> ScheduleAnalyzer:
    return ScheduleAnalyzer(load_analysis_options())


__all__ = ["load_analysis_options", "build_analyzer"]

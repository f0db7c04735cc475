# timeline_infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_DIR_NAME = "schedule-analyzer-lite"


def _platform_data_home() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def user_data_dir() -> Path:
    """
    Per-user directory for analyzer logs, e.g. on Linux
    ~/.local/share/schedule-analyzer-lite.
    PM_DATA_DIR replaces the platform location.
    """
    override = (os.getenv("PM_DATA_DIR") or "").strip()
    base = Path(override) if override else _platform_data_home() / APP_DIR_NAME
    try:
        base.mkdir(parents=True, exist_ok=True)
        return base
    except OSError:
        fallback = Path.home() / f".{APP_DIR_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_log_dir() -> Path:
    override = (os.getenv("PM_LOG_DIR") or "").strip()
    if override:
        return Path(override)
    return user_data_dir() / "logs"


__all__ = ["APP_DIR_NAME", "user_data_dir", "default_log_dir"]

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "schedule-analyzer-lite"
_DEFAULT_APP_VERSION = "0.0.0+unknown"


def get_app_version() -> str:
    """
    Version of the installed distribution.
    PM_APP_VERSION wins when set; a source checkout that was never
    installed reports the placeholder default.
    """
    env_override = (os.getenv("PM_APP_VERSION") or "").strip()
    if env_override:
        return env_override

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return _DEFAULT_APP_VERSION


__all__ = ["DISTRIBUTION_NAME", "get_app_version"]

from __future__ import annotations

from importlib.metadata import PackageNotFoundError

from timeline_infra import path as path_mod
from timeline_infra import version as version_mod


def test_env_override_wins_over_installed_metadata(monkeypatch):
    monkeypatch.setattr(version_mod, "version", lambda name: "1.0.0")
    monkeypatch.setenv("PM_APP_VERSION", " 9.9.9 ")

    assert version_mod.get_app_version() == "9.9.9"


def test_version_comes_from_distribution_metadata(monkeypatch):
    seen = []

    def _fake_version(name):
        seen.append(name)
        return "1.4.2"

    monkeypatch.setattr(version_mod, "version", _fake_version)
    monkeypatch.delenv("PM_APP_VERSION", raising=False)

    assert version_mod.get_app_version() == "1.4.2"
    assert seen == ["schedule-analyzer-lite"]


def test_uninstalled_checkout_reports_default(monkeypatch):
    def _missing(name):
        raise PackageNotFoundError(name)

    monkeypatch.setattr(version_mod, "version", _missing)
    monkeypatch.delenv("PM_APP_VERSION", raising=False)

    assert version_mod.get_app_version() == version_mod._DEFAULT_APP_VERSION


def test_data_dir_override_and_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("PM_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("PM_LOG_DIR", raising=False)

    assert path_mod.user_data_dir() == tmp_path / "data"
    assert (tmp_path / "data").is_dir()
    assert path_mod.default_log_dir() == tmp_path / "data" / "logs"


def test_data_dir_defaults_under_xdg_home(monkeypatch, tmp_path):
    monkeypatch.delenv("PM_DATA_DIR", raising=False)
    monkeypatch.setattr(path_mod.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert path_mod.user_data_dir() == tmp_path / "schedule-analyzer-lite"

from __future__ import annotations

from pathlib import Path

from recentopen.lib.paths import (
    config_path,
    ensure_user_app_data_dir,
    get_user_app_data_dir,
    normalize_file_path,
    recent_files_path,
)


def test_home_override_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("RECENTOPEN_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "AppDataRoaming"))

    app_dir = ensure_user_app_data_dir()

    assert app_dir == tmp_path / "home"
    assert app_dir.exists()
    assert config_path() == app_dir / "config.json"
    assert recent_files_path() == app_dir / "recent_files.json"


def test_appdata_location(monkeypatch, tmp_path):
    monkeypatch.delenv("RECENTOPEN_HOME", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path / "AppDataRoaming"))

    assert get_user_app_data_dir() == tmp_path / "AppDataRoaming" / "recentopen"


def test_home_fallback(monkeypatch, tmp_path):
    monkeypatch.delenv("RECENTOPEN_HOME", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert get_user_app_data_dir() == tmp_path / ".recentopen"


def test_normalize_file_path(tmp_path):
    a = normalize_file_path(tmp_path / "dir" / ".." / "file.txt")
    b = normalize_file_path(str(tmp_path / "file.txt"))

    assert a == b

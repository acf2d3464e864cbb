"""Path utilities for recentopen.

- Resolves the user-scope application data directory
- Provides the canonical paths for the config and recent files list
"""
from __future__ import annotations

import os
from pathlib import Path


_APP_DIR_NAME = "recentopen"
_HOME_ENV = "RECENTOPEN_HOME"
_CONFIG_FILENAME = "config.json"
_RECENT_LIST_FILENAME = "recent_files.json"


def get_user_app_data_dir() -> Path:
    """Return the user-scope application data directory.

    RECENTOPEN_HOME wins when set; otherwise %APPDATA%/recentopen on
    Windows-like environments and ~/.recentopen elsewhere.
    """
    override = os.getenv(_HOME_ENV)
    if override:
        return Path(override).expanduser()
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / _APP_DIR_NAME
    return Path.home() / f".{_APP_DIR_NAME}"


def ensure_user_app_data_dir() -> Path:
    """Ensure the user app data directory exists and return it."""
    p = get_user_app_data_dir()
    p.mkdir(parents=True, exist_ok=True)
    return p


def config_path() -> Path:
    return ensure_user_app_data_dir() / _CONFIG_FILENAME


def recent_files_path() -> Path:
    """Return the full path to the recent files list JSON file."""
    return ensure_user_app_data_dir() / _RECENT_LIST_FILENAME


def normalize_file_path(p: str | os.PathLike[str]) -> str:
    """Normalize a file path for comparisons.

    Expands ~, makes it absolute without requiring existence and
    normalizes case where the platform is case-insensitive.
    """
    abs_path = Path(p).expanduser().resolve(strict=False)
    return os.path.normcase(str(abs_path))

from __future__ import annotations

import json
import os
from datetime import timezone
from pathlib import Path
from typing import Callable, Iterable, Iterator

import pytest
from PySide6 import QtWidgets

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from recentopen.services.editor_host import EditorHost  # noqa: E402
from recentopen.services.host import Callback  # noqa: E402
from recentopen.services.recent_files import ISO_FORMAT, RecentFileEntry, RecentFiles  # noqa: E402


class ManualScheduler:
    """Collects idle callbacks so tests decide when the loop goes idle."""

    def __init__(self) -> None:
        self.pending: list[tuple[float, Callback]] = []

    def call_later(self, delay_seconds: float, callback: Callback) -> None:
        self.pending.append((delay_seconds, callback))

    def run_pending(self) -> None:
        pending, self.pending = self.pending, []
        for _, callback in pending:
            callback()


@pytest.fixture(scope="session")
def qt_app() -> Iterator[QtWidgets.QApplication]:
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def recent_files(tmp_path: Path) -> RecentFiles:
    return RecentFiles(tmp_path / "recent_files.json")


@pytest.fixture()
def host(recent_files: RecentFiles, scheduler: ManualScheduler) -> EditorHost:
    return EditorHost(recent_files, scheduler)


def _write_recent_files(storage_path: Path, entries: Iterable[RecentFileEntry]) -> Path:
    payload = [
        {
            "path": str(entry.path),
            "lastOpened": entry.last_opened.astimezone(timezone.utc).strftime(ISO_FORMAT),
        }
        for entry in entries
    ]
    storage_path.write_text(json.dumps(payload), encoding="utf-8")
    return storage_path


@pytest.fixture()
def write_recent_files() -> Callable[[Path, Iterable[RecentFileEntry]], Path]:
    """Persist entries in the on-disk recent files format."""
    return _write_recent_files

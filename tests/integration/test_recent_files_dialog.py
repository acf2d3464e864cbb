from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from PySide6 import QtWidgets

from recentopen.core.errors import FileOpenError, UserFacingError
from recentopen.services.recent_files import RecentFileEntry
from recentopen.ui import message_dialogs
from recentopen.ui.recent_files_dialog import RecentFilesDialog


def _entries(tmp_path: Path, count: int) -> list[RecentFileEntry]:
    now = datetime.now(timezone.utc)
    return [RecentFileEntry(path=tmp_path / f"file_{idx}.txt", last_opened=now) for idx in range(count)]


@pytest.mark.integration
def test_dialog_lists_entries_and_opens_current(qt_app: QtWidgets.QApplication, tmp_path: Path) -> None:
    opened: list[Path] = []
    dialog = RecentFilesDialog(_entries(tmp_path, 3), opened.append)
    try:
        assert dialog._recent_list.count() == 3  # type: ignore[attr-defined]
        button_texts = {button.text() for button in dialog.findChildren(QtWidgets.QPushButton)}
        assert {"Open", "Open...", "Cancel"}.issubset(button_texts)

        accepted: list[bool] = []
        dialog.accepted.connect(lambda: accepted.append(True))
        dialog._recent_list.setCurrentRow(1)  # type: ignore[attr-defined]
        dialog._open_item()

        assert opened == [tmp_path / "file_1.txt"]
        assert accepted == [True]
    finally:
        dialog.deleteLater()


@pytest.mark.integration
def test_empty_dialog_falls_back_to_file_dialog(
    qt_app: QtWidgets.QApplication, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    opened: list[Path] = []
    chosen = tmp_path / "picked.txt"
    monkeypatch.setattr(
        QtWidgets.QFileDialog,
        "getOpenFileName",
        staticmethod(lambda *args, **kwargs: (str(chosen), "")),
    )
    dialog = RecentFilesDialog([], opened.append)
    try:
        assert dialog._recent_list.count() == 0  # type: ignore[attr-defined]
        dialog._open_item()
        assert opened == [chosen]
    finally:
        dialog.deleteLater()


@pytest.mark.integration
def test_unopenable_entry_shows_error_and_keeps_dialog_open(
    qt_app: QtWidgets.QApplication, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    shown: list[UserFacingError] = []
    monkeypatch.setattr(message_dialogs, "show_user_error", lambda parent, exc: shown.append(exc))

    def open_file(path: Path) -> None:
        raise FileOpenError(str(path), "it is a directory")

    dialog = RecentFilesDialog(_entries(tmp_path, 1), open_file)
    try:
        accepted: list[bool] = []
        dialog.accepted.connect(lambda: accepted.append(True))
        dialog._open_item()

        assert [exc.title for exc in shown] == ["Open Failed"]
        assert accepted == []
    finally:
        dialog.deleteLater()

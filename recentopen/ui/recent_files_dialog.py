from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from PySide6 import QtCore, QtWidgets

from recentopen.core.errors import UserFacingError
from recentopen.services.recent_files import RecentFileEntry
from recentopen.ui import message_dialogs


class RecentFilesDialog(QtWidgets.QDialog):
    """Built-in recent files picker (the ``recentf-open-files`` command)."""

    def __init__(
        self,
        entries: Sequence[RecentFileEntry],
        open_file: Callable[[Path], object],
        *,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Open Recent")
        self.resize(600, 400)

        self._open_file = open_file
        self._logger = logging.getLogger(__name__)

        self._recent_list = QtWidgets.QListWidget()
        self._recent_list.itemActivated.connect(self._open_item)
        for entry in entries:
            item = QtWidgets.QListWidgetItem(str(entry.path))
            item.setData(QtCore.Qt.UserRole, entry)
            self._recent_list.addItem(item)
        if self._recent_list.count():
            self._recent_list.setCurrentRow(0)

        open_button = QtWidgets.QPushButton("Open")
        open_button.clicked.connect(lambda: self._open_item())

        open_other_button = QtWidgets.QPushButton("Open...")
        open_other_button.clicked.connect(self._open_via_dialog)

        cancel_button = QtWidgets.QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)

        buttons_layout = QtWidgets.QHBoxLayout()
        buttons_layout.addWidget(open_button)
        buttons_layout.addWidget(open_other_button)
        buttons_layout.addStretch(1)
        buttons_layout.addWidget(cancel_button)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(self._recent_list)
        layout.addLayout(buttons_layout)

    def _open_item(self, item: QtWidgets.QListWidgetItem | None = None) -> None:
        if item is None:
            item = self._recent_list.currentItem()
        if item is None:
            self._open_via_dialog()
            return
        entry: RecentFileEntry = item.data(QtCore.Qt.UserRole)
        self._open(entry.path)

    def _open_via_dialog(self) -> None:
        path_str, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Open File", str(Path.home()))
        if path_str:
            self._open(Path(path_str))

    def _open(self, path: Path) -> None:
        self._logger.info("Opening recent file", extra={"path": str(path)})
        try:
            self._open_file(path)
        except UserFacingError as exc:
            message_dialogs.show_user_error(self, exc)
            return
        self.accept()


__all__ = ["RecentFilesDialog"]

from __future__ import annotations

from PySide6 import QtWidgets

from recentopen.logging.gui_bridge import GuiLogRecord
from recentopen.services.host import Buffer

ECHO_TIMEOUT_MS = 5000


class EditorWindow(QtWidgets.QMainWindow):
    """One tab per buffer, with the status bar acting as the echo area."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("recentopen")
        self.resize(900, 600)

        self._tabs = QtWidgets.QTabWidget()
        self._tabs.setDocumentMode(True)
        self.setCentralWidget(self._tabs)
        self._editors: dict[str, QtWidgets.QPlainTextEdit] = {}

    @property
    def log_sink(self):
        return self.echo

    def add_buffer(self, buf: Buffer) -> None:
        if buf.name in self._editors:
            self._tabs.setCurrentWidget(self._editors[buf.name])
            return
        editor = QtWidgets.QPlainTextEdit()
        editor.setPlainText(buf.text)
        if buf.file_path is not None:
            editor.setToolTip(str(buf.file_path))
        self._editors[buf.name] = editor
        self._tabs.addTab(editor, buf.name)
        self._tabs.setCurrentWidget(editor)

    def buffer_names(self) -> list[str]:
        return [self._tabs.tabText(index) for index in range(self._tabs.count())]

    def echo(self, record: GuiLogRecord) -> None:
        self.statusBar().showMessage(record.echo_text(), ECHO_TIMEOUT_MS)


__all__ = ["EditorWindow"]

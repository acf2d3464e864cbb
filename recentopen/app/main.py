from __future__ import annotations

import functools
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from PySide6 import QtWidgets

from recentopen.core.config import OpenerConfig, load_config
from recentopen.core.errors import UserFacingError
from recentopen.lib import paths
from recentopen.logging.config import configure_logging
from recentopen.logging.gui_bridge import build_gui_handler
from recentopen.services import plugins
from recentopen.services.editor_host import EditorHost
from recentopen.services.host import Scheduler
from recentopen.services.idle_timer import QtIdleScheduler
from recentopen.services.recent_files import RecentFiles
from recentopen.services.startup_opener import StartupRecentOpener, open_recent_on_startup
from recentopen.ui import message_dialogs
from recentopen.ui.editor_window import EditorWindow
from recentopen.ui.recent_files_dialog import RecentFilesDialog

BUILTIN_RECENT_COMMAND = "recentf-open-files"


@dataclass
class Editor:
    host: EditorHost
    window: EditorWindow
    recent_files: RecentFiles


def build_editor(*, recent_files_path: Path, scheduler: Optional[Scheduler] = None) -> Editor:
    """Create the host, its window and the built-in commands."""
    window = EditorWindow()
    recent = RecentFiles(recent_files_path)
    host = EditorHost(
        recent,
        scheduler or QtIdleScheduler(),
        chooser=functools.partial(message_dialogs.choose_item, window),
        on_error=lambda exc: message_dialogs.show_exception(window, exc),
    )
    for buf in host.buffers():
        window.add_buffer(buf)
    host.buffer_opened.append(window.add_buffer)

    def open_recent_files() -> RecentFilesDialog:
        dialog = RecentFilesDialog(recent.entries(), host.find_file, parent=window)
        dialog.show()
        return dialog

    host.define_command(BUILTIN_RECENT_COMMAND, open_recent_files)
    return Editor(host=host, window=window, recent_files=recent)


def install_opener(editor: Editor, config: OpenerConfig) -> StartupRecentOpener:
    """Apply config to the host and register the startup opener."""
    editor.recent_files.enabled = config.recent_files_enabled
    return open_recent_on_startup(
        editor.host,
        config,
        on_error=lambda exc: message_dialogs.show_user_error(editor.window, exc),
    )


def load_editor_config(editor: Editor, path: Path) -> OpenerConfig:
    """Load plugins and config.json; errors are shown and defaults used."""
    try:
        plugins.load_entry_point_plugins(editor.host)
        return load_config(
            path,
            commands=editor.host.commands,
            load_plugins=functools.partial(plugins.load_plugins, editor.host),
        )
    except UserFacingError as exc:
        message_dialogs.show_user_error(editor.window, exc)
        return OpenerConfig()


def main(argv: Sequence[str] | None = None) -> int:
    app = QtWidgets.QApplication(list(argv) if argv is not None else sys.argv)

    editor = build_editor(recent_files_path=paths.recent_files_path())
    configure_logging(lambda: build_gui_handler(editor.window.log_sink))

    install_opener(editor, load_editor_config(editor, paths.config_path()))

    editor.window.show()
    editor.host.process_command_line(app.arguments()[1:])
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

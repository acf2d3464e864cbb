from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from recentopen.core.errors import CommandNotFoundError, FileOpenError, UserFacingError
from recentopen.lib.paths import normalize_file_path
from recentopen.services.host import Buffer, Callback, Scheduler
from recentopen.services.recent_files import RecentFiles

SCRATCH_BUFFER_NAME = "*scratch*"

Chooser = Callable[[str, Sequence[str]], Optional[str]]
ErrorReporter = Callable[[Exception], None]


class EditorHost:
    """In-process editor state: buffers, commands, mode flags and startup hooks.

    Failures in startup callbacks (command-line hooks, idle callbacks and
    file arguments) go to ``on_error`` when one is given; without it they
    are raised once every callback has had its turn.
    """

    def __init__(
        self,
        recent_files: RecentFiles,
        scheduler: Scheduler,
        *,
        chooser: Optional[Chooser] = None,
        on_error: Optional[ErrorReporter] = None,
    ) -> None:
        self._recent_files = recent_files
        self._scheduler = scheduler
        self._chooser = chooser
        self._on_error = on_error
        self._buffers: List[Buffer] = [Buffer(SCRATCH_BUFFER_NAME)]
        self._commands: Dict[str, Callable[[], Any]] = {}
        self._modes: set[str] = set()
        self._command_line_hooks: List[Callback] = []
        self.buffer_opened: List[Callable[[Buffer], None]] = []
        self._logger = logging.getLogger(__name__)

    # Buffers --------------------------------------------------------
    def buffers(self) -> Sequence[Buffer]:
        return tuple(self._buffers)

    def find_file(self, path: str | Path) -> Buffer:
        key = normalize_file_path(path)
        for buf in self._buffers:
            if buf.file_path is not None and normalize_file_path(buf.file_path) == key:
                return buf

        file_path = Path(path).expanduser()
        text = _read_text(file_path)
        buf = Buffer(_unique_name(file_path.name, self._buffers), file_path=file_path, text=text)
        self._buffers.append(buf)
        self._logger.info("Opened file", extra={"path": str(file_path)})
        for listener in list(self.buffer_opened):
            listener(buf)
        return buf

    # Recent files ---------------------------------------------------
    def recent_files_enabled(self) -> bool:
        return self._recent_files.enabled

    def recent_files(self) -> list[str]:
        return self._recent_files.paths()

    # Modes and commands ---------------------------------------------
    def set_mode(self, name: str, active: bool = True) -> None:
        if active:
            self._modes.add(name)
        else:
            self._modes.discard(name)

    def mode_active(self, name: str) -> bool:
        return name in self._modes

    def define_command(self, name: str, fn: Callable[[], Any]) -> None:
        self._commands[name] = fn

    @property
    def commands(self) -> Mapping[str, Callable[[], Any]]:
        return MappingProxyType(self._commands)

    def command_available(self, name: str) -> bool:
        return name in self._commands

    def call_command(self, name: str) -> Any:
        try:
            fn = self._commands[name]
        except KeyError:
            raise CommandNotFoundError(name) from None
        return fn()

    def completion_available(self) -> bool:
        return self._chooser is not None

    def completing_read(self, prompt: str, choices: Sequence[str]) -> Optional[str]:
        if self._chooser is None:
            raise UserFacingError(
                "No completion prompt is available",
                title="Completion Unavailable",
            )
        return self._chooser(prompt, choices)

    # Startup lifecycle ----------------------------------------------
    def add_command_line_hook(self, callback: Callback) -> None:
        self._command_line_hooks.append(callback)

    def process_command_line(self, args: Iterable[str]) -> None:
        """Open file arguments, then fire and clear the command-line hooks."""
        errors: list[Exception] = []
        for arg in args:
            try:
                self.find_file(arg)
            except UserFacingError as exc:
                errors.append(exc)

        hooks, self._command_line_hooks = self._command_line_hooks, []
        for hook in hooks:
            try:
                hook()
            except Exception as exc:
                errors.append(exc)

        self._report(errors)

    def run_when_idle(self, delay_seconds: float, callback: Callback) -> None:
        def guarded() -> None:
            try:
                callback()
            except Exception as exc:
                self._report([exc])

        self._scheduler.call_later(delay_seconds, guarded)

    def _report(self, errors: Sequence[Exception]) -> None:
        if not errors:
            return
        if self._on_error is None:
            raise errors[0]
        for exc in errors:
            if isinstance(exc, UserFacingError):
                self._logger.warning("Startup failed: %s", exc)
            else:
                self._logger.error("Startup callback failed", exc_info=exc)
            self._on_error(exc)


def _read_text(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return ""
    except IsADirectoryError:
        raise FileOpenError(str(file_path), "it is a directory") from None
    except PermissionError:
        raise FileOpenError(str(file_path), "permission denied") from None
    except OSError as exc:
        raise FileOpenError(str(file_path), exc.strerror or str(exc)) from exc


def _unique_name(base: str, buffers: Sequence[Buffer]) -> str:
    taken = {buf.name for buf in buffers}
    name = base
    index = 2
    while name in taken:
        name = f"{base}<{index}>"
        index += 1
    return name


__all__ = ["EditorHost", "SCRATCH_BUFFER_NAME", "Chooser", "ErrorReporter"]

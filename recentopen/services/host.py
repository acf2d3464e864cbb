from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, Sequence

Callback = Callable[[], None]


@dataclass
class Buffer:
    name: str
    file_path: Optional[Path] = None
    text: str = ""

    @property
    def is_file_backed(self) -> bool:
        return self.file_path is not None


class Scheduler(Protocol):
    def call_later(self, delay_seconds: float, callback: Callback) -> None:
        ...


class Host(Protocol):
    """Editor APIs the startup opener relies on."""

    def buffers(self) -> Sequence[Buffer]:
        ...

    def recent_files_enabled(self) -> bool:
        ...

    def recent_files(self) -> list[str]:
        ...

    def mode_active(self, name: str) -> bool:
        ...

    def command_available(self, name: str) -> bool:
        ...

    def call_command(self, name: str) -> Any:
        ...

    def completion_available(self) -> bool:
        ...

    def completing_read(self, prompt: str, choices: Sequence[str]) -> Optional[str]:
        ...

    def find_file(self, path: str | Path) -> Buffer:
        ...

    def add_command_line_hook(self, callback: Callback) -> None:
        ...

    def run_when_idle(self, delay_seconds: float, callback: Callback) -> None:
        ...


__all__ = ["Buffer", "Callback", "Host", "Scheduler"]

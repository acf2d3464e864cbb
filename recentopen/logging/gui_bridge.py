from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

SEVERITY_MAP: Mapping[int, str] = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


@dataclass(slots=True)
class GuiLogRecord:
    message: str
    level: str

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "GuiLogRecord":
        return cls(
            message=record.getMessage(),
            level=SEVERITY_MAP.get(record.levelno, "info"),
        )

    def echo_text(self) -> str:
        if self.level in ("info", "debug"):
            return self.message
        return f"{self.level.upper()}: {self.message}"


class EchoAreaHandler(logging.Handler):
    """Forward log records to the editor's echo area callback."""

    def __init__(self, emitter: Callable[[GuiLogRecord], None]) -> None:
        super().__init__()
        self._emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        try:
            self._emitter(GuiLogRecord.from_record(record))
        except Exception:  # pragma: no cover - handler must not raise
            self.handleError(record)


def build_gui_handler(emitter: Callable[[GuiLogRecord], None]) -> EchoAreaHandler:
    return EchoAreaHandler(emitter)


__all__ = ["GuiLogRecord", "EchoAreaHandler", "build_gui_handler", "SEVERITY_MAP"]

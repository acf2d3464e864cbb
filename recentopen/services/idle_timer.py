from __future__ import annotations

import logging

from PySide6.QtCore import QTimer

from recentopen.services.host import Callback


class QtIdleScheduler:
    """One-shot callbacks on the Qt event loop.

    QTimer.singleShot only fires once the loop is running and idle enough
    to process timers, so scheduling before ``app.exec()`` is fine.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def call_later(self, delay_seconds: float, callback: Callback) -> None:
        msec = max(0, int(round(delay_seconds * 1000)))
        QTimer.singleShot(msec, callback)
        self._logger.debug("Idle callback scheduled", extra={"msec": msec})


__all__ = ["QtIdleScheduler"]

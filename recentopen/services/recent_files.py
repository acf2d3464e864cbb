from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
DEFAULT_LIMIT = 15


@dataclass(slots=True)
class RecentFileEntry:
    path: Path
    last_opened: datetime


def load_once(storage_path: Path, *, limit: int = DEFAULT_LIMIT) -> List[RecentFileEntry]:
    if not storage_path.exists():
        return []

    try:
        payload = json.loads(storage_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return []
    if not isinstance(payload, list):
        return []

    entries: List[RecentFileEntry] = []
    for item in payload:
        try:
            raw_path = Path(item["path"])
            timestamp = _parse_timestamp(item["lastOpened"])
        except (KeyError, TypeError, ValueError):
            continue
        entries.append(RecentFileEntry(path=raw_path, last_opened=timestamp))
    entries.sort(key=lambda entry: entry.last_opened, reverse=True)
    return entries[:limit]


class RecentFiles:
    """The host's recent-files subsystem: an enabled flag over a persisted list.

    The list is loaded lazily on first access and never written here.
    """

    def __init__(self, storage_path: Path, *, enabled: bool = True, limit: int = DEFAULT_LIMIT) -> None:
        self.storage_path = storage_path
        self.enabled = enabled
        self._limit = limit
        self._entries: Optional[List[RecentFileEntry]] = None

    def entries(self) -> List[RecentFileEntry]:
        if self._entries is None:
            self._entries = load_once(self.storage_path, limit=self._limit)
        return list(self._entries)

    def paths(self) -> List[str]:
        return [str(entry.path) for entry in self.entries()]


def _parse_timestamp(value: str) -> datetime:
    base = datetime.strptime(value, ISO_FORMAT)
    return base.replace(tzinfo=timezone.utc)


__all__ = ["RecentFileEntry", "RecentFiles", "load_once", "DEFAULT_LIMIT", "ISO_FORMAT"]

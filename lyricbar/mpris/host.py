from __future__ import annotations

import threading
from typing import Iterator

from lyricbar.host.base import TrackHost

from .client import TrackInfo

_FIELDS = ("artist", "title", "album", "lyrics")


class MprisHost(TrackHost):
    """
    Host backed by a live MPRIS player.

    The listing is just the current track, and nothing is ever selected.
    `current` is swapped by the watch loop while resolutions read from it.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.current: TrackInfo | None = None

    def set_current(self, info: TrackInfo) -> None:
        with self._lock:
            self.current = info

    def find_metadata(self, track: TrackInfo, key: str) -> str | None:
        if key not in _FIELDS:
            return None
        return getattr(track, key) or None

    def is_selected(self, track: TrackInfo) -> bool:
        return False

    def tracks(self) -> Iterator[TrackInfo]:
        with self._lock:
            current = self.current
        return iter([current] if current is not None else [])

    def lock(self) -> threading.RLock:
        return self._lock

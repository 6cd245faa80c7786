from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterator

from .base import TrackHost


@dataclass(eq=False, slots=True)
class PlaylistItem:
    metadata: dict[str, str] = field(default_factory=dict)
    selected: bool = False


class PlaylistHost(TrackHost):
    """In-memory listing, used for one-shot lookups and cache maintenance from the CLI."""

    def __init__(self, items: list[PlaylistItem] | None = None):
        self.items: list[PlaylistItem] = list(items or [])
        self._lock = threading.RLock()

    @classmethod
    def single(cls, *, selected: bool = False, **metadata: str | None) -> tuple["PlaylistHost", PlaylistItem]:
        item = PlaylistItem({k: v for k, v in metadata.items() if v is not None}, selected=selected)
        return cls([item]), item

    def add(self, metadata: dict[str, str], *, selected: bool = False) -> PlaylistItem:
        item = PlaylistItem(dict(metadata), selected=selected)
        with self._lock:
            self.items.append(item)
        return item

    def find_metadata(self, track: PlaylistItem, key: str) -> str | None:
        return track.metadata.get(key)

    def is_selected(self, track: PlaylistItem) -> bool:
        return track.selected

    def tracks(self) -> Iterator[PlaylistItem]:
        return iter(list(self.items))

    def lock(self) -> threading.RLock:
        return self._lock

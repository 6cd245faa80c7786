from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ContextManager, Iterator

# Display hook: set_lyrics(track, text). Fire-and-forget.
LyricsSink = Callable[[Any, str], None]


class TrackHost:
    """
    Read-only view of the player that owns the tracks.

    Tracks are opaque handles; everything about them goes through the host,
    and metadata reads must happen inside `lock()`.
    """

    def find_metadata(self, track: Any, key: str) -> str | None:
        raise NotImplementedError

    def is_selected(self, track: Any) -> bool:
        raise NotImplementedError

    def tracks(self) -> Iterator[Any]:
        """Tracks of the currently displayed listing, in order."""
        raise NotImplementedError

    def lock(self) -> ContextManager[Any]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class TrackView:
    """A track bound to its host. Each `meta()` call locks only around that read."""

    host: TrackHost
    track: Any

    def meta(self, key: str) -> str | None:
        with self.host.lock():
            return self.host.find_metadata(self.track, key)

    def meta_first(self, *keys: str) -> str | None:
        with self.host.lock():
            for key in keys:
                value = self.host.find_metadata(self.track, key)
                if value:
                    return value
        return None

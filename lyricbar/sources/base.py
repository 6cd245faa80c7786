from __future__ import annotations

from lyricbar.host.base import TrackView


class LyricsSource:
    """One fallback strategy. `fetch` returns lyrics text or None, never raises for "not found"."""

    name: str

    def fetch(self, track: TrackView) -> str | None:
        raise NotImplementedError

from __future__ import annotations

import logging
from typing import Any, Sequence

from lyricbar.cache.disk import DiskCache
from lyricbar.config import AppConfig
from lyricbar.host.base import LyricsSink, TrackHost, TrackView
from lyricbar.i18n import t

from .azlyrics import AzLyricsSource
from .base import LyricsSource
from .http import DocumentFetcher
from .script import ScriptSource
from .types import LyricsResponse, TrackKey

logger = logging.getLogger(__name__)

LYRICS_TAG_KEYS = ("unsynced lyrics", "UNSYNCEDLYRICS", "lyrics")


class LyricsService:
    """
    Resolves lyrics for one track at a time:
    tags -> disk cache -> providers in order -> "not found".

    Every stage ends by pushing text to `sink`, so the panel is never left empty.
    """

    def __init__(
        self,
        host: TrackHost,
        cache: DiskCache,
        sources: Sequence[LyricsSource],
        sink: LyricsSink,
    ):
        self.host = host
        self.cache = cache
        self.sources = list(sources)
        self.sink = sink

    @classmethod
    def from_config(cls, cfg: AppConfig, host: TrackHost, sink: LyricsSink) -> "LyricsService":
        return cls(host, DiskCache(cfg.cache_dir), cls._build_sources(cfg), sink)

    @staticmethod
    def _build_sources(cfg: AppConfig) -> list[LyricsSource]:
        fetcher = DocumentFetcher(timeout_s=cfg.fetch_timeout_s, max_bytes=cfg.max_document_bytes)
        return [
            ScriptSource(cfg.custom_command, timeout_s=cfg.script_timeout_s),
            AzLyricsSource(fetcher),
        ]

    def _display(self, track: Any, text: str) -> None:
        self.sink(track, text)

    def update_lyrics(self, track: Any) -> LyricsResponse:
        view = TrackView(self.host, track)

        tagged = view.meta_first(*LYRICS_TAG_KEYS)
        if tagged:
            self._display(track, tagged)
            return LyricsResponse(text=tagged, source="metadata")

        with self.host.lock():
            artist = self.host.find_metadata(track, "artist")
            title = self.host.find_metadata(track, "title")

        if not artist or not title:
            logger.warning("Track has no artist/title, cannot look up lyrics")
            self._display(track, t("lyrics_not_found"))
            return LyricsResponse(text=None, source=None)

        key = TrackKey(artist=artist, title=title)
        cached = self.cache.load(artist, title)
        if cached is not None:
            logger.debug("Cache hit for %s", key.display)
            self._display(track, cached)
            return LyricsResponse(text=cached, source="cache")

        self._display(track, t("loading"))

        for src in self.sources:
            try:
                lyrics = src.fetch(view)
            except Exception:
                logger.exception("Source %s failed for %s", src.name, key.display)
                continue
            if lyrics:
                logger.info("Lyrics for %s found via %s", key.display, src.name)
                try:
                    saved = self.cache.save(artist, title, lyrics)
                except Exception:
                    logger.exception("Saving lyrics for %s to cache failed", key.display)
                    saved = False
                if not saved:
                    logger.warning("Could not cache lyrics for %s", key.display)
                self._display(track, lyrics)
                return LyricsResponse(text=lyrics, source=src.name)
            logger.debug("Source %s has nothing for %s", src.name, key.display)

        self._display(track, t("lyrics_not_found"))
        return LyricsResponse(text=None, source=None)

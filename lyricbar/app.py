from __future__ import annotations

import logging
import signal
import threading
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any

from lyricbar.config import AppConfig
from lyricbar.i18n import t
from lyricbar.mpris.client import MprisClient, TrackInfo
from lyricbar.mpris.errors import NoPlayersFound, PlayerUnavailable
from lyricbar.mpris.host import MprisHost
from lyricbar.render.ansi import AnsiRenderer
from lyricbar.sources.service import LyricsService
from lyricbar.sources.types import TrackKey

logger = logging.getLogger(__name__)


class LyricsPanel:
    """
    Hand-off point between the resolution worker and the render loop.

    `set_lyrics` is the service's sink; updates for a track that is no
    longer current are dropped.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._track: Any = None
        self._text: str | None = None
        self._version = 0

    def show_track(self, track: Any) -> None:
        with self._lock:
            self._track = track
            self._text = None
            self._version += 1

    def set_lyrics(self, track: Any, text: str) -> None:
        with self._lock:
            if track is not self._track:
                return
            self._text = text
            self._version += 1

    def snapshot(self) -> tuple[int, str | None]:
        with self._lock:
            return self._version, self._text


def submit_resolution(worker: Executor, svc: LyricsService, panel: LyricsPanel, track: Any) -> Future:
    """Queue `svc.update_lyrics(track)`; a crash ends on "Lyrics not found" instead of a stuck panel."""

    def _done(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("Lyrics resolution failed", exc_info=exc)
            panel.set_lyrics(track, t("lyrics_not_found"))

    future = worker.submit(svc.update_lyrics, track)
    future.add_done_callback(_done)
    return future


def watch(cfg: AppConfig, *, preferred_player: str | None) -> int:
    """
    Main watch loop:
    MPRIS -> track change -> resolve on worker -> panel -> render on change.
    """
    host = MprisHost()
    panel = LyricsPanel()
    svc = LyricsService.from_config(cfg, host, panel.set_lyrics)
    placeholders = {t("loading"), t("lyrics_not_found")}

    renderer = AnsiRenderer(use_alt_screen=cfg.use_alt_screen)
    renderer.enter()

    # Handle SIGINT (Ctrl+C) gracefully
    def _on_sigint(signum, frame):
        renderer.exit()
        raise KeyboardInterrupt

    signal.signal(signal.SIGINT, _on_sigint)

    # Resolutions run one at a time, in track-change order.
    worker = ThreadPoolExecutor(max_workers=1, thread_name_prefix="lyricbar-resolve")
    try:
        last_track_key: str | None = None
        current: TrackInfo | None = None
        rendered_version = -1
        tick_s = 1.0 / max(cfg.refresh_hz, 1.0)

        while True:
            try:
                client = MprisClient.pick_player(preferred=preferred_player)
            except NoPlayersFound:
                renderer.render("lyricbar", [t("no_mpris_players")], placeholder=True)
                last_track_key = None
                time.sleep(1.0)
                continue

            try:
                ti = client.track_info()
            except PlayerUnavailable as e:
                renderer.render("lyricbar", [t("mpris_unavailable", error=str(e))], placeholder=True)
                time.sleep(0.5)
                continue

            if ti.track_key != last_track_key:
                last_track_key = ti.track_key
                current = ti
                host.set_current(ti)
                panel.show_track(ti)
                rendered_version = -1
                submit_resolution(worker, svc, panel, ti)

            version, text = panel.snapshot()
            if current is not None and version != rendered_version:
                rendered_version = version
                title = TrackKey(artist=current.artist, title=current.title).display
                if text is None:
                    renderer.render(title, [], placeholder=True)
                else:
                    renderer.render(title, text.splitlines(), placeholder=text in placeholders)

            time.sleep(tick_s)
    finally:
        worker.shutdown(wait=False, cancel_futures=True)
        renderer.exit()

from __future__ import annotations

import logging
from typing import Iterator

from requests.utils import quote

from lyricbar.host.base import TrackView
from lyricbar.text import alpha_digitize

from .base import LyricsSource
from .errors import FileTooLargeError
from .extract import extract_lyrics
from .http import DocumentFetcher

logger = logging.getLogger(__name__)

AZLYRICS_URL = "https://www.azlyrics.com/lyrics/{artist}/{title}.html"
_BRACKETS = "()[]"


def title_candidates(title: str) -> Iterator[str]:
    """
    Normalized titles to try, longest first.

    After each attempt the title is cut back to its last bracket, and the
    bracket itself is dropped, so "Song (Remix)" yields "songremix" and then
    "song". A cut that normalizes to the previous candidate is not retried.
    """
    title = title.lower()
    last: str | None = None
    while title:
        norm = alpha_digitize(title)
        if norm and norm != last:
            yield norm
            last = norm
        while title and title[-1] not in _BRACKETS:
            title = title[:-1]
        title = title[:-1]


class AzLyricsSource(LyricsSource):
    name = "azlyrics"

    def __init__(self, fetcher: DocumentFetcher | None = None):
        self.fetcher = fetcher or DocumentFetcher()

    @staticmethod
    def build_url(artist: str, title: str) -> str:
        return AZLYRICS_URL.format(artist=quote(artist, safe=""), title=quote(title, safe=""))

    def fetch(self, track: TrackView) -> str | None:
        artist = track.meta("artist")
        title = track.meta("title")
        if not artist or not title:
            return None

        artist = alpha_digitize(artist.lower())
        if not artist:
            logger.debug("azlyrics: artist has no letters or digits, skipping")
            return None

        doc: bytes | None = None
        for norm_title in title_candidates(title):
            url = self.build_url(artist, norm_title)
            logger.debug("azlyrics: trying %s", url)
            try:
                doc = self.fetcher.fetch_document(url)
            except FileTooLargeError as e:
                logger.error("azlyrics: giving up on %s - %s: %s", artist, title, e)
                return None
            if doc is not None:
                break

        if doc is None:
            return None

        lyrics = extract_lyrics(doc)
        if lyrics is None:
            logger.info("azlyrics: no lyrics block in %s (layout changed?)", url)
        return lyrics

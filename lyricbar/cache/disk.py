from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

from lyricbar.text import cache_filename

logger = logging.getLogger(__name__)


class DiskCache:
    """
    One plain UTF-8 file per (artist, title) under `cache_dir`.

    An entry counts as cached as soon as its file exists, whatever it contains.
    """

    def __init__(self, cache_dir: Path):
        self.cache_dir = Path(cache_dir)

    def path_for(self, artist: str, title: str) -> Path:
        return cache_filename(self.cache_dir, artist, title)

    def is_cached(self, artist: str | None, title: str | None) -> bool:
        return artist is not None and title is not None and self.path_for(artist, title).exists()

    def ensure_dir(self) -> int:
        """
        Create the cache directory one segment at a time.

        Returns 0 on success or the errno of the first failing mkdir.
        """
        for segment in (*reversed(self.cache_dir.parents), self.cache_dir):
            if str(segment) in ("", ".", segment.anchor):
                continue
            try:
                os.mkdir(segment, 0o755)
            except FileExistsError:
                continue
            except OSError as e:
                logger.error("Could not create cache directory %s: %s", segment, e)
                return e.errno or errno.EIO
        return 0

    def load(self, artist: str, title: str) -> str | None:
        path = self.path_for(artist, title)
        logger.debug("Cache lookup: %s", path)
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Cache miss for %s: %s", path, e)
            return None

    def save(self, artist: str, title: str, text: str) -> bool:
        self.ensure_dir()
        path = self.path_for(artist, title)
        try:
            f = open(path, "w", encoding="utf-8", newline="")
        except OSError as e:
            logger.error("Could not open file for writing: %s (%s)", path, e)
            return False
        try:
            with f:
                f.write(text)
        except OSError as e:
            logger.error("Could not write lyrics to %s (%s)", path, e)
            return False
        logger.debug("Cached lyrics at %s", path)
        return True

    def remove(self, artist: str | None, title: str | None) -> bool:
        if not self.is_cached(artist, title):
            return False
        path = self.path_for(artist, title)  # type: ignore[arg-type]
        try:
            path.unlink()
        except OSError as e:
            logger.warning("Could not remove cache entry %s: %s", path, e)
            return False
        logger.info("Removed cache entry %s", path)
        return True

    def clear(self) -> int:
        if not self.cache_dir.is_dir():
            return 0
        removed = 0
        for entry in self.cache_dir.iterdir():
            if not entry.is_file():
                continue
            try:
                entry.unlink()
                removed += 1
            except OSError as e:
                logger.warning("Could not remove cache entry %s: %s", entry, e)
        return removed

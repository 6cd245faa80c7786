from __future__ import annotations

import logging

from lyricbar.host.base import TrackHost

from .disk import DiskCache

logger = logging.getLogger(__name__)


def remove_selected_from_cache(host: TrackHost, cache: DiskCache) -> int:
    """Drop the cache entries of the selected tracks in the current listing. Returns how many went."""
    removed = 0
    with host.lock():
        for track in host.tracks():
            if not host.is_selected(track):
                continue
            artist = host.find_metadata(track, "artist")
            title = host.find_metadata(track, "title")
            if cache.remove(artist, title):
                removed += 1
    logger.debug("Removed %s selected entries from cache", removed)
    return removed

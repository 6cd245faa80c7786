from __future__ import annotations

from pathlib import Path

import regex

# Letters of any script plus decimal digits, mirroring what the lyrics site keeps in its URLs.
_NON_ALNUM_RE = regex.compile(r"[^\p{L}\p{Nd}]+")


def cache_filename(cache_dir: Path, artist: str, title: str) -> Path:
    """
    Path of the cache entry for (artist, title).

    Slashes become underscores so each part stays a single path component;
    nothing else is sanitized.
    """
    artist = artist.replace("/", "_")
    title = title.replace("/", "_")
    return cache_dir / f"{artist}-{title}"


def alpha_digitize(s: str) -> str:
    return _NON_ALNUM_RE.sub("", s)

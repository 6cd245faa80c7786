"""Lyrics for the currently playing track: tags, disk cache, script, azlyrics."""

__version__ = "0.1.0"

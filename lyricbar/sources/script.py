from __future__ import annotations

import logging
import re
import shlex
import subprocess

from lyricbar.host.base import TrackView

from .base import LyricsSource
from .errors import TemplateError

logger = logging.getLogger(__name__)

_FIELD_RE = re.compile(r"%([^%]*)%")


def render_command(template: str, track: TrackView) -> str:
    """
    Expand `%field%` placeholders with the track's metadata.

    Values are shell-quoted; a missing field expands to an empty argument.
    `%%` is a literal percent sign. A dangling `%` raises TemplateError.
    """
    out: list[str] = []
    pos = 0
    for m in _FIELD_RE.finditer(template):
        out.append(template[pos : m.start()])
        field = m.group(1)
        if not field:
            out.append("%")
        else:
            out.append(shlex.quote(track.meta(field) or ""))
        pos = m.end()
    rest = template[pos:]
    if "%" in rest:
        raise TemplateError(f"unterminated '%' at offset {pos + rest.index('%')}")
    out.append(rest)
    return "".join(out)


class ScriptSource(LyricsSource):
    name = "script"

    def __init__(self, command_template: str | None, *, timeout_s: float = 60.0):
        self.command_template = command_template or ""
        self.timeout_s = timeout_s

    def fetch(self, track: TrackView) -> str | None:
        if not self.command_template.strip():
            return None

        try:
            command = render_command(self.command_template, track)
        except TemplateError as e:
            logger.warning("Invalid script command %r: %s", self.command_template, e)
            return None

        logger.debug("Running lyrics script: %s", command)
        try:
            proc = subprocess.run(
                command,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout_s,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Lyrics script timed out after %ss: %s", self.timeout_s, command)
            return None
        except OSError as e:
            logger.warning("Could not run lyrics script: %s", e)
            return None

        if proc.returncode != 0:
            logger.info("Lyrics script exited with status %s", proc.returncode)
            return None
        if not proc.stdout:
            return None

        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Script output is not valid UTF-8, ignoring it")
            return None

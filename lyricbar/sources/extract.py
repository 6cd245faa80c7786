from __future__ import annotations

import re

# azlyrics puts the lyrics in the first bare <div> that opens with its "usage" notice comment.
_LYRICS_BLOCK_RE = re.compile(
    r"<div>\s*<!--\s*Usage of azlyrics\.com content.*?-->\s*(.*?)\s*</div>",
    re.DOTALL,
)
# A break plus the line ending written right after it count as one newline.
_BR_RE = re.compile(r"<br\s*/?\s*>(?:\r?\n)?", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")


def extract_lyrics(html: str | bytes) -> str | None:
    """
    Pull plain lyrics text out of an azlyrics song page.

    Returns None when the page does not carry the expected block
    (wrong page or changed layout) or when nothing but whitespace is left.
    Only `&quot;` is unescaped.
    """
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")

    m = _LYRICS_BLOCK_RE.search(html)
    if m is None:
        return None

    lyrics = _BR_RE.sub("\n", m.group(1))
    lyrics = _TAG_RE.sub("", lyrics)
    lyrics = lyrics.replace("&quot;", '"')
    if not lyrics.strip():
        return None
    if not lyrics.endswith("\n"):
        lyrics += "\n"
    return lyrics

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib.resources import files

logger = logging.getLogger(__name__)

LANGUAGES = ("en", "ru")
DEFAULT_LANG = "en"

_active: dict[str, str] = {}


@lru_cache(maxsize=None)
def _catalog(lang: str) -> dict[str, str]:
    resource = files(__name__) / f"{lang}.json"
    try:
        return dict(json.loads(resource.read_text(encoding="utf-8")))
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s strings: %s", lang, e)
        return {}


def set_lang(lang: str | None) -> None:
    """Switch placeholders and messages to `lang` (EN/RU, any case); unknown codes mean English."""
    code = (lang or DEFAULT_LANG).lower()
    if code not in LANGUAGES:
        code = DEFAULT_LANG
    _active.clear()
    _active.update(_catalog(DEFAULT_LANG))
    _active.update(_catalog(code))


def t(key: str, **fields: str | int) -> str:
    text = _active.get(key, key)
    return text.format(**fields) if fields else text


set_lang(DEFAULT_LANG)

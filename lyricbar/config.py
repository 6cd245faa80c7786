from __future__ import annotations

import json
import logging
from dataclasses import dataclass
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lyricbar"
    return Path.home() / ".config" / "lyricbar"


def _config_file() -> Path:
    return _config_dir() / "config.json"


def _cache_dir() -> Path:
    override = os.getenv("LYRICBAR_CACHE_DIR")
    if override:
        return Path(override)
    xdg = os.getenv("XDG_CACHE_HOME")
    root = Path(xdg) if xdg else Path.home() / ".cache"
    return root / "lyricbar" / "lyrics"


@dataclass(frozen=True)
class AppConfig:
    # Storage
    cache_dir: Path
    config_dir: Path

    # Locale
    lang: str

    # Sources
    custom_command: str
    fetch_timeout_s: float
    max_document_bytes: int
    script_timeout_s: float

    # MPRIS
    preferred_player: str | None

    # Rendering
    refresh_hz: float
    use_alt_screen: bool


def load_config() -> AppConfig:
    config_dir = _config_dir()
    lang = _load_lang(config_dir)
    custom_command = get_config_str("customcmd", os.getenv("LYRICBAR_CUSTOMCMD", ""))

    return AppConfig(
        cache_dir=_cache_dir(),
        config_dir=config_dir,
        lang=lang,
        custom_command=custom_command,
        fetch_timeout_s=float(os.getenv("LYRICBAR_FETCH_TIMEOUT", "10.0")),
        max_document_bytes=int(os.getenv("LYRICBAR_MAX_DOCUMENT_BYTES", str(1 << 20))),
        script_timeout_s=float(os.getenv("LYRICBAR_SCRIPT_TIMEOUT", "60.0")),
        preferred_player=os.getenv("LYRICBAR_PLAYER") or None,
        refresh_hz=float(os.getenv("LYRICBAR_REFRESH_HZ", "4.0")),
        use_alt_screen=os.getenv("LYRICBAR_ALT_SCREEN", "1") not in ("0", "false", "False"),
    )


def _read_config_json() -> dict[str, str]:
    cfg_path = _config_file()
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    return data if isinstance(data, dict) else {}


def get_config_str(key: str, default: str = "") -> str:
    """String value from config.json, or `default` when unset."""
    value = _read_config_json().get(key)
    if value is None:
        return default
    return str(value)


def _load_lang(config_dir: Path) -> str:
    # Priority: config.json → LYRICBAR_LANG → "EN"
    raw = get_config_str("lang").upper()
    if raw in ("RU", "EN"):
        return raw
    env_lang = os.getenv("LYRICBAR_LANG")
    if env_lang and env_lang.upper() in ("RU", "EN"):
        return env_lang.upper()
    return "EN"


def save_config_value(key: str, value: str) -> None:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _read_config_json()
    data[key] = value
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def save_config_lang(lang: str) -> None:
    save_config_value("lang", lang.upper())

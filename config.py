import os
import json
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(os.getenv("TSENG_SETTINGS_PATH", "").strip() or Path(__file__).with_name("settings.json"))

# Window size is None until one has been saved; AppConfig supplies it until then.
DEFAULT_SETTINGS = {
    "window_width": None,
    "window_height": None,
    "aliases": [],
}

_SIZE_KEYS = ("window_width", "window_height")


def _coerce_size(value, default):
    try:
        size = int(value)
    except (TypeError, ValueError):
        return default
    return size if size > 0 else default


def _sanitize_aliases(value) -> list:
    aliases = []
    seen_addresses = set()
    seen_names = set()
    for item in value:
        if not isinstance(item, dict):
            continue
        address = item.get("address")
        alias = item.get("alias")
        if not isinstance(address, str) or not isinstance(alias, str):
            continue
        address, alias = address.strip(), alias.strip()
        if not address or not alias or address in seen_addresses or alias in seen_names:
            continue
        seen_addresses.add(address)
        seen_names.add(alias)
        aliases.append({"address": address, "alias": alias})
    return aliases


def load_app_settings() -> dict:
    settings = DEFAULT_SETTINGS.copy()
    settings["aliases"] = []
    if not _SETTINGS_PATH.exists():
        return settings
    try:
        loaded = json.loads(_SETTINGS_PATH.read_text(encoding="utf-8"))
        if isinstance(loaded, dict):
            for key in DEFAULT_SETTINGS:
                value = loaded.get(key)
                if key == "aliases" and isinstance(value, list):
                    settings["aliases"] = _sanitize_aliases(value)
                elif key in _SIZE_KEYS:
                    settings[key] = _coerce_size(value, DEFAULT_SETTINGS[key])
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, e)
    return settings


def save_app_settings(settings: dict):
    payload = load_app_settings()
    for key in DEFAULT_SETTINGS:
        if key not in settings:
            continue
        value = settings.get(key)
        if key == "aliases" and isinstance(value, list):
            payload[key] = _sanitize_aliases(value)
        elif key in _SIZE_KEYS:
            payload[key] = _coerce_size(value, payload.get(key))
    try:
        _SETTINGS_PATH.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except OSError as e:
        logger.error("Failed to save settings to %s: %s", _SETTINGS_PATH, e)

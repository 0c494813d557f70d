"""
Settings interchange: a flat JSON record of positive integers.
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional
from data import DEFAULT_SETTINGS, is_positive_int, write_json_file


@dataclass(frozen=True)
class AppSettings:
    """Grid, target size and playback rate shared between sessions."""

    srcCols: int = DEFAULT_SETTINGS["srcCols"]
    srcRows: int = DEFAULT_SETTINGS["srcRows"]
    targetWidth: int = DEFAULT_SETTINGS["targetWidth"]
    targetHeight: int = DEFAULT_SETTINGS["targetHeight"]
    fps: int = DEFAULT_SETTINGS["fps"]


def get_default_settings() -> AppSettings:
    return AppSettings()


def settings_from_dict(data: Optional[Dict[str, Any]]) -> AppSettings:
    """Build settings from a possibly partial document.

    Each key that is missing, unknown or not a positive integer falls back
    to its default on its own. Unknown keys are ignored.
    """
    if not isinstance(data, dict):
        return get_default_settings()

    values = {}
    for key, default in DEFAULT_SETTINGS.items():
        value = data.get(key)
        if is_positive_int(value):
            values[key] = value
        else:
            if key in data:
                print(f"[WARNING] Ignoring invalid setting {key}={value!r}, using {default}")
            values[key] = default

    return AppSettings(**values)


def settings_to_dict(settings: AppSettings) -> Dict[str, int]:
    return asdict(settings)


def settings_from_json(text: str) -> AppSettings:
    """Parse a JSON settings document.

    Raises:
        ValueError: If ``text`` is not valid JSON
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid settings JSON: {e}") from e
    return settings_from_dict(data)


def settings_to_json(settings: AppSettings) -> str:
    return json.dumps(settings_to_dict(settings), indent=2)


def read_settings_file(filepath: Path) -> AppSettings:
    """Load settings from disk. A missing file yields the defaults."""
    if not filepath.exists():
        return get_default_settings()

    with open(filepath, "r", encoding="utf-8") as f:
        return settings_from_json(f.read())


def write_settings_file(filepath: Path, settings: AppSettings) -> None:
    write_json_file(filepath, settings_to_dict(settings), indent=2)
    print(f"[OK] Settings saved to: {filepath}")

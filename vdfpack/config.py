"""Persistent JSON config helpers.

Stores user defaults for comments and legacy-mode output names.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

CONFIG_PATH = Path.home() / ".config" / "vdfpack.json"
DEFAULT_LEGACY_OUTPUT_NAME = "DEFAULT.VDF"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_text(key: str) -> str | None:
    value = load_config().get(key)
    return value if isinstance(value, str) else None


def load_default_comment() -> str:
    """Comment used when neither the command line nor the script sets one."""
    return _load_text("default_comment") or ""


def load_legacy_output_name() -> str:
    """File name written inside the input directory in legacy mode."""
    name = _load_text("legacy_output_name")
    if not name or Path(name).name != name:
        return DEFAULT_LEGACY_OUTPUT_NAME
    return name

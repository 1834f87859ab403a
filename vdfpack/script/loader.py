"""YAML build-script model and loader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from ..errors import ScriptError


@dataclass(frozen=True)
class VolumeScript:
    """Declarative description of one volume build.

    Empty ``base_dir``/``file_path`` mean the value must come from a CLI
    override instead.
    """

    comment: str = ""
    base_dir: Path | None = None
    file_path: Path | None = None
    file_include_globs: tuple[str, ...] = ()


def _optional_text(path: Path, data: dict[str, object], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    raise ScriptError(path, f"{key!r} must be a string")


def _optional_path(path: Path, data: dict[str, object], key: str) -> Path | None:
    text = _optional_text(path, data, key)
    return Path(text) if text else None


def parse_script(text: str, path: Path = Path("<script>")) -> VolumeScript:
    """Parse YAML ``text``; ``path`` is only used in error messages."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ScriptError(path, f"invalid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ScriptError(path, "top level must be a mapping")

    globs = data.get("file_include_globs") or []
    if isinstance(globs, str) or not isinstance(globs, list):
        raise ScriptError(path, "'file_include_globs' must be a list of patterns")
    if not all(isinstance(pattern, str) for pattern in globs):
        raise ScriptError(path, "'file_include_globs' entries must be strings")

    return VolumeScript(
        comment=_optional_text(path, data, "comment"),
        base_dir=_optional_path(path, data, "base_dir"),
        file_path=_optional_path(path, data, "file_path"),
        file_include_globs=tuple(globs),
    )


def load_script(path: Path) -> VolumeScript:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptError(path, f"cannot read script: {exc}") from exc
    return parse_script(text, path)

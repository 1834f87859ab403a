"""Combine a build script with CLI overrides into concrete build inputs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import UsageError
from ..file_tree.filters import DepthFilter
from .globs import build_depth_filter
from .loader import VolumeScript


@dataclass(frozen=True)
class ResolvedScript:
    """Everything the tree builder and writer need for one script build."""

    base_dir: Path
    output_path: Path
    comment: str
    depth_filter: DepthFilter


def resolve_script(
    script: VolumeScript,
    base_dir_override: Path | None = None,
    output_override: Path | None = None,
    comment_override: str | None = None,
    default_comment: str = "",
) -> ResolvedScript:
    """Apply override precedence (CLI, then script, then defaults).

    Raises ``UsageError`` when no base directory or output path is available.
    """
    base_dir = base_dir_override if base_dir_override is not None else script.base_dir
    if base_dir is None or not str(base_dir):
        raise UsageError("Empty base directory path in script file and no override was provided.")
    output_path = output_override if output_override is not None else script.file_path
    if output_path is None or not str(output_path):
        raise UsageError("Empty output path in script file and no override was provided.")

    if comment_override is not None:
        comment = comment_override
    else:
        comment = script.comment or default_comment

    base_dir = Path(base_dir)
    if not base_dir.is_dir():
        raise UsageError(f"Base directory is not a directory: {base_dir}")

    return ResolvedScript(
        base_dir=base_dir,
        output_path=Path(output_path),
        comment=comment,
        depth_filter=build_depth_filter(base_dir, script.file_include_globs),
    )

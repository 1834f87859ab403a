"""Exception taxonomy for volume builds.

Library code raises these at the point of failure.
Only ``vdfpack.cli`` turns them into a process exit.
"""

from __future__ import annotations

from pathlib import Path


class VdfpackError(Exception):
    """Base class for every error raised by vdfpack."""


class UsageError(VdfpackError):
    """Missing or wrongly typed inputs, detected before any output is written."""


class ScriptError(UsageError):
    """Build script cannot be read, parsed, or has wrongly typed fields."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class VolumeBuildError(VdfpackError):
    """Fatal error while assembling the in-memory volume."""

    def __init__(self, path: Path | None, message: str) -> None:
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.path = path

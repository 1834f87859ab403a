"""Domain datatypes for the source tree packed into a volume."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileNode:
    """Leaf file discovered on disk."""

    name: str
    path: Path
    depth: int = 0
    is_last: bool = False


@dataclass(frozen=True)
class DirectoryNode:
    """Directory with children sorted dirs-first, then case-insensitively by name."""

    name: str
    path: Path
    depth: int = 0
    is_last: bool = False
    children: tuple["FileSystemNode", ...] = ()


FileSystemNode = DirectoryNode | FileNode


__all__ = [
    "FileNode",
    "DirectoryNode",
    "FileSystemNode",
]

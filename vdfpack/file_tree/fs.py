"""Filesystem scanning and source-tree construction for volume builds."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from ..errors import UsageError
from .filters import DepthFilter
from .types import DirectoryNode, FileNode, FileSystemNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One directory-child record as seen by ``os.scandir``."""

    name: str
    path: Path
    is_dir: bool


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], Exception | None]:
    """List children of ``directory`` in volume order.

    Directories come before files, each group ordered case-insensitively by
    name. Returns ``(children, scan_error)``; ``scan_error`` is set when the
    directory cannot be scanned, in which case ``children`` is empty.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


def _mark_last(nodes: list[FileSystemNode]) -> tuple[FileSystemNode, ...]:
    """Flag the final node of an already sorted sibling group."""
    if nodes:
        nodes[-1] = replace(nodes[-1], is_last=True)
    return tuple(nodes)


def _walk(directory: Path, depth: int, depth_filter: DepthFilter | None) -> tuple[FileSystemNode, ...]:
    """Build child nodes of ``directory``; children sit at ``depth``."""
    children, scan_error = list_directory_children(directory)
    if scan_error is not None:
        logger.warning("Error reading directory %s: %s", directory, scan_error)
        return ()

    nodes: list[FileSystemNode] = []
    for child in children:
        if depth_filter is not None and not depth_filter.accepts(child.name, depth):
            continue
        if child.is_dir:
            nodes.append(
                DirectoryNode(
                    name=child.name,
                    path=child.path,
                    depth=depth,
                    children=_walk(child.path, depth + 1, depth_filter),
                )
            )
        else:
            nodes.append(FileNode(name=child.name, path=child.path, depth=depth))
    return _mark_last(nodes)


def build_file_tree(root: Path) -> FileSystemNode:
    """Build the full tree under ``root``.

    A non-directory ``root`` yields a bare ``FileNode``.
    """
    root = Path(root)
    if not root.is_dir():
        return FileNode(name=root.name, path=root, depth=0)
    return DirectoryNode(name=root.name, path=root, depth=0, children=_walk(root, 1, None))


def build_filtered_file_tree(root: Path, depth_filter: DepthFilter) -> DirectoryNode:
    """Build the tree under ``root`` keeping only nodes ``depth_filter`` accepts.

    Pruning is top-down: rejected directories are never entered, and accepted
    directories with no accepted descendants stay as empty containers.
    """
    root = Path(root)
    if not root.is_dir():
        raise UsageError(f"Base directory is not a directory: {root}")
    return DirectoryNode(name=root.name, path=root, depth=0, children=_walk(root, 1, depth_filter))

"""Source-tree model for volume builds.

Walks a base directory into an owned tree of directory/file nodes.
Siblings are sorted dirs-first and flagged with their last-sibling marker.
"""

from __future__ import annotations

from .filters import DepthFilter
from .fs import DirectoryChild, build_file_tree, build_filtered_file_tree, list_directory_children
from .types import DirectoryNode, FileNode, FileSystemNode

__all__ = [
    "DepthFilter",
    "DirectoryChild",
    "DirectoryNode",
    "FileNode",
    "FileSystemNode",
    "build_file_tree",
    "build_filtered_file_tree",
    "list_directory_children",
]

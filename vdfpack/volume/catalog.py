"""Breadth-first flattening of a source tree into the volume catalog."""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from pathlib import Path

from ..errors import VolumeBuildError
from ..file_tree.types import DirectoryNode, FileSystemNode
from .encoding import encode_name
from .types import CatalogEntry, EntryType

ROOT_PARENT = -1


def _entry_type(is_dir: bool, is_last: bool) -> EntryType:
    entry_type = EntryType.DIRECTORY if is_dir else EntryType.NONE
    if is_last:
        entry_type |= EntryType.LAST
    return entry_type


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise VolumeBuildError(path, f"cannot read file: {exc.strerror or exc}") from exc


class CatalogBuilder:
    """Accumulates catalog entries and file data for one volume build.

    Entries are emitted in BFS order starting from the root's children, so
    siblings always occupy a contiguous run of indices. ``children_of`` maps a
    directory's catalog index to its children's indices (in order), which
    resolves each directory's first child without rescanning the catalog.
    """

    def __init__(self) -> None:
        self.entries: list[CatalogEntry] = []
        self.children_of: dict[int, list[int]] = {}
        self._data = bytearray()

    @property
    def data(self) -> bytearray:
        return self._data

    def _append(self, entry: CatalogEntry, path: Path) -> int:
        try:
            encode_name(entry.name)
        except VolumeBuildError as exc:
            raise VolumeBuildError(path, "entry name does not fit the catalog") from exc
        index = len(self.entries)
        self.entries.append(entry)
        self.children_of.setdefault(entry.parent_index, []).append(index)
        return index

    def enumerate_tree(self, root: FileSystemNode) -> None:
        """BFS pass: create entries and append file contents in visit order."""
        if not isinstance(root, DirectoryNode):
            return
        queue: deque[tuple[int, FileSystemNode]] = deque((ROOT_PARENT, child) for child in root.children)
        while queue:
            parent_index, node = queue.popleft()
            if isinstance(node, DirectoryNode):
                index = self._append(
                    CatalogEntry(
                        name=node.name,
                        entry_type=_entry_type(True, node.is_last),
                        parent_index=parent_index,
                    ),
                    node.path,
                )
                queue.extend((index, child) for child in node.children)
            else:
                content = _read_file(node.path)
                self._append(
                    CatalogEntry(
                        name=node.name,
                        size=len(content),
                        entry_type=_entry_type(False, node.is_last),
                        parent_index=parent_index,
                    ),
                    node.path,
                )
                self._data += content

    def resolve_first_children(self) -> None:
        """Point each directory's ``next_index`` at its first child.

        Directories without children keep ``next_index`` 0, which is
        indistinguishable from a reference to catalog entry 0.
        """
        for index, entry in enumerate(self.entries):
            if not entry.is_dir:
                continue
            children = self.children_of.get(index)
            if children:
                self.entries[index] = replace(entry, next_index=children[0])


def linearize(tree: FileSystemNode) -> tuple[list[CatalogEntry], bytearray]:
    """Flatten ``tree`` into ``(catalog, data)``.

    The root itself is not emitted and the data buffer is returned without
    a copy. File ``next_index`` values are left at 0 for the offset pass. Raises ``VolumeBuildError`` on the first unreadable
    file.
    """
    builder = CatalogBuilder()
    builder.enumerate_tree(tree)
    builder.resolve_first_children()
    return builder.entries, builder.data

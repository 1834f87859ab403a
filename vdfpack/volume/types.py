"""Volume format constants and record datatypes.

All integer fields are little-endian u32. The header is followed by one
fixed-width catalog record per entry, then the raw data segment.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

from ..file_tree.types import FileSystemNode

COMMENT_SIZE = 256
COMMENT_FILL = b"\x1a"
SIGNATURE = b"PSVDSC_V2.00\n\r\n\r"
VERSION = 0x50
NAME_SIZE = 64
NAME_FILL = b" "

HEADER_STRUCT = struct.Struct(f"<{COMMENT_SIZE}s{len(SIGNATURE)}s6I")
ENTRY_STRUCT = struct.Struct(f"<{NAME_SIZE}s4I")
HEADER_SIZE = HEADER_STRUCT.size
ENTRY_SIZE = ENTRY_STRUCT.size
U32_MAX = 0xFFFFFFFF


class EntryType(enum.IntFlag):
    """Catalog entry type bits; a plain file has no bits set."""

    NONE = 0
    LAST = 0x40000000
    DIRECTORY = 0x80000000


def is_plain_file(entry_type: int) -> bool:
    """Return whether ``entry_type`` is a file (optionally last in its group)."""
    return entry_type in (EntryType.NONE, EntryType.LAST)


@dataclass(frozen=True)
class CatalogEntry:
    """One flat catalog record.

    ``next_index`` is the first child's catalog index for directories and the
    absolute data offset for files. ``parent_index`` is the catalog index of
    the owning directory (``-1`` for top-level entries) and is never written.
    """

    name: str
    next_index: int = 0
    size: int = 0
    entry_type: EntryType = EntryType.NONE
    attributes: int = 0
    parent_index: int = -1

    @property
    def is_dir(self) -> bool:
        return bool(self.entry_type & EntryType.DIRECTORY)

    @property
    def is_last(self) -> bool:
        return bool(self.entry_type & EntryType.LAST)


@dataclass(frozen=True)
class VolumeHeader:
    """Volume header; ``comment`` holds the full fixed-width field."""

    comment: bytes = COMMENT_FILL * COMMENT_SIZE
    signature: bytes = SIGNATURE
    num_files: int = 0
    num_entries: int = 0
    timestamp: int = 0
    size: int = 0
    catalog_offset: int = HEADER_SIZE
    version: int = VERSION

    @property
    def comment_text(self) -> str:
        return self.comment.rstrip(COMMENT_FILL).decode("utf-8", errors="replace")


@dataclass(frozen=True)
class VolumeArchive:
    """Fully built volume ready for serialization."""

    header: VolumeHeader
    tree: FileSystemNode
    catalog: tuple[CatalogEntry, ...] = ()
    data: bytes | bytearray = field(default=b"", repr=False)


__all__ = [
    "COMMENT_FILL",
    "COMMENT_SIZE",
    "ENTRY_SIZE",
    "ENTRY_STRUCT",
    "HEADER_SIZE",
    "HEADER_STRUCT",
    "NAME_FILL",
    "NAME_SIZE",
    "SIGNATURE",
    "U32_MAX",
    "VERSION",
    "CatalogEntry",
    "EntryType",
    "VolumeArchive",
    "VolumeHeader",
    "is_plain_file",
]

"""Volume catalog construction and binary serialization.

Turns a source tree into a flat BFS-ordered catalog plus a data segment.
Then writes header, catalog and data in the fixed little-endian layout.
"""

from __future__ import annotations

from .build import build_volume, new_header
from .catalog import CatalogBuilder, linearize
from .describe import describe_volume
from .encoding import encode_comment, encode_name, pack_entry, pack_header
from .offsets import assign_file_offsets, data_segment_start, header_totals
from .timestamp import dos_timestamp
from .types import (
    ENTRY_SIZE,
    HEADER_SIZE,
    SIGNATURE,
    VERSION,
    CatalogEntry,
    EntryType,
    VolumeArchive,
    VolumeHeader,
    is_plain_file,
)
from .writer import write_volume

__all__ = [
    "ENTRY_SIZE",
    "HEADER_SIZE",
    "SIGNATURE",
    "VERSION",
    "CatalogBuilder",
    "CatalogEntry",
    "EntryType",
    "VolumeArchive",
    "VolumeHeader",
    "assign_file_offsets",
    "build_volume",
    "data_segment_start",
    "describe_volume",
    "dos_timestamp",
    "encode_comment",
    "encode_name",
    "header_totals",
    "is_plain_file",
    "linearize",
    "new_header",
    "pack_entry",
    "pack_header",
    "write_volume",
]

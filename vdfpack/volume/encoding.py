"""Fixed-width field encoders for header and catalog records."""

from __future__ import annotations

import logging

from ..errors import VolumeBuildError
from .types import (
    COMMENT_FILL,
    COMMENT_SIZE,
    ENTRY_STRUCT,
    HEADER_STRUCT,
    NAME_FILL,
    NAME_SIZE,
    CatalogEntry,
    VolumeHeader,
)

logger = logging.getLogger(__name__)


def encode_name(name: str) -> bytes:
    """Upper-case ASCII letters and pad ``name`` with spaces to the field width."""
    raw = name.encode("utf-8").upper()
    if len(raw) > NAME_SIZE:
        raise VolumeBuildError(None, f"entry name {name!r} is longer than {NAME_SIZE} bytes")
    return raw.ljust(NAME_SIZE, NAME_FILL)


def encode_comment(comment: str) -> bytes:
    """Overwrite the prefix of the fill-byte comment field with ``comment``."""
    raw = comment.encode("utf-8")
    if len(raw) > COMMENT_SIZE:
        logger.warning("Comment is longer than %d bytes, truncating", COMMENT_SIZE)
        raw = raw[:COMMENT_SIZE]
    return raw.ljust(COMMENT_SIZE, COMMENT_FILL)


def pack_header(header: VolumeHeader) -> bytes:
    return HEADER_STRUCT.pack(
        header.comment,
        header.signature,
        header.num_files,
        header.num_entries,
        header.timestamp,
        header.size,
        header.catalog_offset,
        header.version,
    )


def pack_entry(entry: CatalogEntry) -> bytes:
    return ENTRY_STRUCT.pack(
        encode_name(entry.name),
        entry.next_index,
        entry.size,
        int(entry.entry_type),
        entry.attributes,
    )

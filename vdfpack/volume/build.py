"""Assemble a complete ``VolumeArchive`` from a source tree."""

from __future__ import annotations

from datetime import datetime

from ..file_tree.types import FileSystemNode
from .catalog import linearize
from .encoding import encode_comment
from .offsets import assign_file_offsets, header_totals
from .timestamp import dos_timestamp
from .types import VolumeArchive, VolumeHeader


def new_header(comment: str = "", moment: datetime | None = None) -> VolumeHeader:
    """Return a default header stamped with ``moment`` and carrying ``comment``."""
    return VolumeHeader(comment=encode_comment(comment), timestamp=dos_timestamp(moment))


def build_volume(tree: FileSystemNode, comment: str = "", moment: datetime | None = None) -> VolumeArchive:
    """Linearize ``tree``, assign data offsets and fill in header totals.

    Raises ``VolumeBuildError`` before anything touches the output path.
    """
    header = new_header(comment, moment)
    catalog, data = linearize(tree)
    header = header_totals(header, catalog)
    catalog = assign_file_offsets(catalog, header.catalog_offset)
    return VolumeArchive(header=header, tree=tree, catalog=tuple(catalog), data=data)


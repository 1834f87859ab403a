"""Data-segment offsets and header totals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ..errors import VolumeBuildError
from .types import ENTRY_SIZE, HEADER_SIZE, U32_MAX, CatalogEntry, VolumeHeader, is_plain_file


def data_segment_start(num_files: int, catalog_offset: int = HEADER_SIZE) -> int:
    """Return the absolute offset of the first data byte."""
    return catalog_offset + num_files * ENTRY_SIZE


def assign_file_offsets(
    catalog: Sequence[CatalogEntry],
    catalog_offset: int = HEADER_SIZE,
) -> list[CatalogEntry]:
    """Set each file's ``next_index`` to its absolute data offset.

    Offsets follow catalog order, the same order file contents were
    concatenated in. Directory entries are returned unchanged.
    """
    position = data_segment_start(len(catalog), catalog_offset)
    assigned: list[CatalogEntry] = []
    for entry in catalog:
        if is_plain_file(entry.entry_type):
            if position > U32_MAX:
                raise VolumeBuildError(None, f"data offset of {entry.name!r} exceeds 32 bits")
            entry = replace(entry, next_index=position)
            position += entry.size
        assigned.append(entry)
    return assigned


def header_totals(header: VolumeHeader, catalog: Sequence[CatalogEntry]) -> VolumeHeader:
    """Return ``header`` with entry counts, data size and catalog offset filled in."""
    size = sum(entry.size for entry in catalog)
    if size > U32_MAX:
        raise VolumeBuildError(None, f"total data size {size} exceeds 32 bits")
    return replace(
        header,
        num_files=len(catalog),
        num_entries=sum(1 for entry in catalog if is_plain_file(entry.entry_type)),
        size=size,
        catalog_offset=HEADER_SIZE,
    )

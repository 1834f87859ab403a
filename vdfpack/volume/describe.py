"""Human-readable dump of a built volume."""

from __future__ import annotations

from .encoding import encode_name
from .types import NAME_FILL, NAME_SIZE, SIGNATURE, CatalogEntry, VolumeArchive, VolumeHeader


def describe_header(header: VolumeHeader) -> str:
    signature = header.signature.decode("ascii", errors="replace").rstrip()
    lines = [
        f"Comment: {header.comment_text}",
        f"Signature: {signature}",
        f"Number of Files: {header.num_files}",
        f"Number of Entries: {header.num_entries}",
        f"Timestamp: {header.timestamp}",
        f"Size: {header.size}",
        f"Catalog Offset: {header.catalog_offset}",
        f"Version: {header.version}",
    ]
    if header.signature != SIGNATURE:
        lines.append("Warning: unexpected signature")
    return "\n".join(lines)


def describe_entry(index: int, entry: CatalogEntry) -> str:
    name = encode_name(entry.name).rstrip(NAME_FILL).decode("utf-8", errors="replace")
    kind = "dir" if entry.is_dir else "file"
    last = " last" if entry.is_last else ""
    return (
        f"{index:>6}  {name:<{NAME_SIZE}} {kind}{last:<5}  "
        f"next={entry.next_index:<10} size={entry.size:<10} type=0x{int(entry.entry_type):08X}"
    )


def describe_volume(archive: VolumeArchive) -> str:
    """Render the header followed by one line per catalog entry."""
    out = ["Volume Header:", describe_header(archive.header), "", "Volume Catalog:"]
    out.extend(describe_entry(index, entry) for index, entry in enumerate(archive.catalog))
    return "\n".join(out) + "\n"

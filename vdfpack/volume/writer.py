"""Sequential serialization of a built volume to disk."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from .encoding import pack_entry, pack_header
from .types import VolumeArchive

logger = logging.getLogger(__name__)


def write_volume(archive: VolumeArchive, output_path: Path) -> None:
    """Write header, catalog and data segment to ``output_path``.

    The destination is created or truncated. Write errors propagate as
    ``OSError`` and may leave a truncated file behind.
    """
    output_path = Path(output_path)
    started = time.perf_counter()
    logger.info("Writing %s", output_path)
    with output_path.open("wb") as handle:
        handle.write(pack_header(archive.header))
        for entry in archive.catalog:
            handle.write(pack_entry(entry))
        handle.write(archive.data)
    logger.info("Done: %.2fs", time.perf_counter() - started)

"""DOS date/time packing for the volume header."""

from __future__ import annotations

from datetime import datetime, timezone


def dos_timestamp(moment: datetime | None = None) -> int:
    """Pack ``moment`` (default: now, UTC) into a 32-bit DOS date/time value.

    Bits 25-31 hold ``year - 1980``, 21-24 the month, 16-20 the day,
    11-15 the hour, 5-10 the minute and 0-4 ``second // 2``.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    return (
        ((moment.year - 1980) << 25)
        | (moment.month << 21)
        | (moment.day << 16)
        | (moment.hour << 11)
        | (moment.minute << 5)
        | (moment.second // 2)
    )

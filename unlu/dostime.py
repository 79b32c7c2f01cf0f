"""DOS-style packed time stamps counted in days from the end of 1977."""

import time as _time

EPOCH_YEAR = 1977
EPOCH_MONTH = 12
EPOCH_DAY = 31

BITS_HOURS = 5
BITS_MINS = 6
BITS_2SEC = 5
SHIFT_HOURS = BITS_MINS + BITS_2SEC
SHIFT_MINS = BITS_2SEC
MASK_HOURS = (1 << BITS_HOURS) - 1
MASK_MINS = (1 << BITS_MINS) - 1
MASK_2SEC = (1 << BITS_2SEC) - 1

_SECONDS_PER_DAY = 24 * 60 * 60


def _epoch() -> int:
    """Local midnight at the start of the epoch day, as a Unix timestamp."""
    return int(
        _time.mktime((EPOCH_YEAR, EPOCH_MONTH, EPOCH_DAY, 0, 0, 0, 0, 0, 0))
    )


def dos_hour(t: int) -> int:
    """Hour field of a packed DOS time."""
    return (t >> SHIFT_HOURS) & MASK_HOURS


def dos_minutes(t: int) -> int:
    """Minute field of a packed DOS time."""
    return (t >> SHIFT_MINS) & MASK_MINS


def dos_seconds(t: int) -> int:
    """Seconds of a packed DOS time (stored with two-second resolution)."""
    return (t & MASK_2SEC) * 2


def dos_mktime(day: int, time: int) -> int:
    """Unix timestamp for a day count since the epoch and a packed DOS time."""
    hour = dos_hour(time)
    minutes = dos_minutes(time)
    seconds = dos_seconds(time)
    return _epoch() + day * _SECONDS_PER_DAY + (hour * 60 + minutes) * 60 + seconds
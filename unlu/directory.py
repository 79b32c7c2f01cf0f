"""Directory entries of LU (.lbr) archives and their conversion to members."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from .dostime import dos_mktime

NAMELEN = 8
EXTLEN = 3
SECTOR = 128
NAMEREC_LEN = NAMELEN + 1 + EXTLEN + 1

_LAYOUT = struct.Struct("<B8s3sHHHHHHHB5s")
ENTRY_SIZE = _LAYOUT.size
ENTRIES_PER_SECTOR = SECTOR // ENTRY_SIZE

_BLANK_NAME = b" " * NAMELEN


class Status(IntEnum):
    """Status byte of a directory entry."""

    ACTIVE = 0x00
    DELETED = 0xFE
    UNUSED = 0xFF


class NameError_(ValueError):
    """A directory entry's 8+3 name cannot be turned into a file name."""


@dataclass
class DirEntry:
    """One 32-byte directory entry as stored in the archive."""

    status: int = Status.ACTIVE
    name: bytes = _BLANK_NAME
    ext: bytes = b" " * EXTLEN
    first_sector: int = 0
    sectors_used: int = 0
    crc: int = 0
    ctim_day: int = 0
    mtim_day: int = 0
    ctim_hms: int = 0
    mtim_hms: int = 0
    pad: int = 0
    filler: bytes = b"\x00" * 5

    def __post_init__(self) -> None:
        if len(self.name) != NAMELEN:
            raise ValueError(f"name must be {NAMELEN} bytes, got {len(self.name)}")
        if len(self.ext) != EXTLEN:
            raise ValueError(f"ext must be {EXTLEN} bytes, got {len(self.ext)}")
        if len(self.filler) != 5:
            raise ValueError(f"filler must be 5 bytes, got {len(self.filler)}")

    @classmethod
    def from_bytes(cls, data) -> DirEntry:
        """Decode an entry from exactly ENTRY_SIZE bytes."""
        data = bytes(data)
        if len(data) != ENTRY_SIZE:
            raise ValueError(
                f"directory entry must be {ENTRY_SIZE} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack(data))

    def to_bytes(self) -> bytes:
        """Encode the entry in its on-disk form."""
        return _LAYOUT.pack(
            self.status,
            self.name,
            self.ext,
            self.first_sector,
            self.sectors_used,
            self.crc,
            self.ctim_day,
            self.mtim_day,
            self.ctim_hms,
            self.mtim_hms,
            self.pad,
            self.filler,
        )

    def is_directory_control(self) -> bool:
        """True if this entry can be the archive's first, self-describing entry."""
        return (
            self.status == Status.ACTIVE
            and self.name == _BLANK_NAME
            and self.first_sector == 0
            and self.sectors_used > 0
        )


@dataclass(frozen=True)
class Member:
    """An archive member in a form convenient for listing and extraction."""

    offset: int
    size: int
    name: str
    ctime: int
    mtime: int
    crc: int


def _field(raw: bytes) -> str:
    chars = raw.split(b" ", 1)[0]
    return chars.lower().decode("latin-1")


def convert_name(entry: DirEntry) -> str:
    """Lower-cased "name.ext" for an entry; "." when both parts are blank."""
    base = _field(entry.name)
    if base:
        name = base + ("." if entry.ext[:1] != b" " else "") + _field(entry.ext)
    elif entry.ext[:1] == b" ":
        name = "."
    else:
        raise NameError_(
            f"member has an extension but no name: {entry.ext.decode('latin-1')!r}"
        )
    return name.split("\0", 1)[0]


def convert(entry: DirEntry) -> Member:
    """Turn a raw directory entry into a Member."""
    return Member(
        offset=entry.first_sector * SECTOR,
        size=entry.sectors_used * SECTOR - entry.pad,
        name=convert_name(entry),
        ctime=dos_mktime(entry.ctim_day, entry.ctim_hms),
        mtime=dos_mktime(entry.mtim_day, entry.mtim_hms),
        crc=entry.crc,
    )
"""Reading LU (.lbr) archives: directory, member data and CRC checks."""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator

from .crc16 import crc16
from .directory import (
    ENTRIES_PER_SECTOR,
    ENTRY_SIZE,
    SECTOR,
    DirEntry,
    Member,
    Status,
)

ZEOF = 0x1A

# Byte offset of the CRC field inside a directory entry.
_CRC_OFFSET = 16
_PRINTABLE = frozenset(range(0x20, 0x7F)) | frozenset(b"\t\n\v\f\r")


class ArchiveError(Exception):
    """The archive cannot be read or is not laid out as expected."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def match(patterns: Iterable[str], name: str) -> bool:
    """True if the name matches any of the shell-style patterns."""
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def strip_text_eof(data: bytes) -> bytes:
    """Drop the trailing ^Z padding of a text member; binary data is kept whole.

    The data is treated as binary when more than two of its bytes, not
    counting the final two, are neither printable nor white space.
    """
    data = bytes(data)
    if len(data) < 2:
        return data
    body, tail = data[:-2], data[-2:]
    nonprint = sum(1 for byte in body if byte not in _PRINTABLE)
    if nonprint > 2:
        return data
    if tail[0] == ZEOF:
        return body
    if tail[1] == ZEOF:
        return body + tail[:1]
    return data


@dataclass
class Archive:
    """An LU archive's directory and, when loaded, its whole contents."""

    entries: list[DirEntry]
    directory: bytes
    data: bytes | None = None

    @classmethod
    def read(cls, stream: BinaryIO, load_data: bool = True) -> Archive:
        """Read the directory from a binary stream, and the member data too if asked."""
        head = _read_exact(stream, ENTRY_SIZE)
        if len(head) != ENTRY_SIZE:
            raise ArchiveError("couldn't read the directory of the archive")
        master = DirEntry.from_bytes(head)
        if not master.is_directory_control():
            raise ArchiveError("not an LU archive: bad directory control entry")

        count = master.sectors_used * ENTRIES_PER_SECTOR
        entries = [master]
        raw = [head]
        max_sector = 0
        max_sector_size = 0
        while len(entries) < count:
            chunk = _read_exact(stream, ENTRY_SIZE)
            if len(chunk) != ENTRY_SIZE:
                break
            entry = DirEntry.from_bytes(chunk)
            entries.append(entry)
            raw.append(chunk)
            if entry.status == Status.ACTIVE and entry.first_sector > max_sector:
                max_sector = entry.first_sector
                max_sector_size = entry.sectors_used

        dir_bytes = master.sectors_used * SECTOR
        directory = b"".join(raw).ljust(dir_bytes, b"\0")
        data = None
        if load_data:
            total = max(max_sector + max_sector_size, master.sectors_used) * SECTOR
            body = _read_exact(stream, total - dir_bytes)
            data = (directory + body).ljust(total, b"\0")
        return cls(entries=entries, directory=directory, data=data)

    def active_entries(self) -> Iterator[DirEntry]:
        """Yield active entries in order, skipping deleted ones, up to the first unused one.

        Raises ArchiveError on reaching an entry whose status is unknown.
        """
        for entry in self.entries:
            if entry.status == Status.ACTIVE:
                yield entry
            elif entry.status == Status.DELETED:
                continue
            elif entry.status == Status.UNUSED:
                return
            else:
                raise ArchiveError(
                    f"expected status UNUSED got '0x{entry.status:02x}'"
                )

    def directory_crc(self) -> int:
        """CRC of the directory sectors, taken with the stored directory CRC set to zero."""
        buf = bytearray(self.directory)
        buf[_CRC_OFFSET:_CRC_OFFSET + 2] = b"\0\0"
        return crc16(buf)

    def _require_data(self) -> bytes:
        if self.data is None:
            raise ArchiveError("archive data was not loaded")
        return self.data

    def member_crc(self, entry: DirEntry) -> int:
        """CRC of the sectors an entry occupies; the directory's own CRC for the control entry."""
        if entry.first_sector == 0:
            return self.directory_crc()
        data = self._require_data()
        begin = entry.first_sector * SECTOR
        return crc16(data[begin:begin + entry.sectors_used * SECTOR])

    def member_bytes(self, member: Member) -> bytes:
        """The bytes of a member, as long as its recorded size."""
        data = self._require_data()
        return data[member.offset:member.offset + member.size]
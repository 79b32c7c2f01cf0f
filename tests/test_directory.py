import pytest

from unlu.directory import (
    ENTRY_SIZE,
    SECTOR,
    DirEntry,
    Member,
    NameError_,
    Status,
    convert,
    convert_name,
)
from unlu.dostime import dos_mktime


def test_status_values():
    assert Status(0) is Status.ACTIVE
    assert Status(0xFE) is Status.DELETED
    assert Status(0xFF) is Status.UNUSED


def test_entry_size_fills_quarter_sector():
    assert len(DirEntry().to_bytes()) == ENTRY_SIZE
    assert SECTOR % ENTRY_SIZE == 0


def test_round_trip():
    entry = DirEntry(
        status=Status.ACTIVE,
        name=b"README  ",
        ext=b"TXT",
        first_sector=7,
        sectors_used=3,
        crc=0xBEEF,
        ctim_day=100,
        mtim_day=200,
        ctim_hms=0x1234,
        mtim_hms=0x4321,
        pad=5,
        filler=b"abcde",
    )
    assert DirEntry.from_bytes(entry.to_bytes()) == entry


def test_wire_layout_is_little_endian():
    raw = DirEntry(status=0xFE, name=b"ABCDEFGH", ext=b"XYZ", first_sector=1,
                   sectors_used=0x0203, pad=9).to_bytes()
    assert raw[0] == 0xFE
    assert raw[1:9] == b"ABCDEFGH"
    assert raw[9:12] == b"XYZ"
    assert raw[12:14] == b"\x01\x00"
    assert raw[14:16] == b"\x03\x02"
    assert raw[26] == 9


@pytest.mark.parametrize("size", [0, ENTRY_SIZE - 1, ENTRY_SIZE + 1])
def test_from_bytes_rejects_wrong_length(size):
    with pytest.raises(ValueError):
        DirEntry.from_bytes(b"\x00" * size)


def test_bad_name_length_rejected():
    with pytest.raises(ValueError):
        DirEntry(name=b"SHORT")


def test_directory_control_recognised():
    assert DirEntry(sectors_used=1).is_directory_control()


@pytest.mark.parametrize(
    "entry",
    [
        DirEntry(sectors_used=0),
        DirEntry(sectors_used=1, first_sector=1),
        DirEntry(sectors_used=1, status=Status.DELETED),
        DirEntry(sectors_used=1, name=b"FILE    "),
    ],
)
def test_directory_control_rejected(entry):
    assert not entry.is_directory_control()


@pytest.mark.parametrize(
    "name, ext, expected",
    [
        (b"README  ", b"TXT", "readme.txt"),
        (b"FOO     ", b"   ", "foo"),
        (b"LONGNAME", b"C  ", "longname.c"),
        (b"        ", b"   ", "."),
        (b"A B     ", b"X Y", "a.x"),
    ],
)
def test_convert_name(name, ext, expected):
    assert convert_name(DirEntry(name=name, ext=ext)) == expected


def test_convert_name_extension_only_is_an_error():
    with pytest.raises(NameError_):
        convert_name(DirEntry(name=b"        ", ext=b"TXT"))


def test_convert_builds_member():
    entry = DirEntry(name=b"DATA    ", ext=b"BIN", first_sector=4,
                     sectors_used=2, pad=10, crc=0x1021,
                     ctim_day=3, ctim_hms=0x0800, mtim_day=4, mtim_hms=0)
    member = convert(entry)
    assert member == Member(
        offset=4 * SECTOR,
        size=2 * SECTOR - 10,
        name="data.bin",
        ctime=dos_mktime(3, 0x0800),
        mtime=dos_mktime(4, 0),
        crc=0x1021,
    )


def test_convert_propagates_name_error():
    with pytest.raises(NameError_):
        convert(DirEntry(name=b"        ", ext=b"COM", sectors_used=1))
# unlu

`unlu` lists, tests and extracts the members of LU library archives (`.lbr`).
These archives were common on CP/M-80 and early MS-DOS systems.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. To run the tests, install `pytest` with the extra `pip install .[test]` and then run `pytest`.

## Command-line use

```
unlu [-C dir] [-l|-x|-t] [-v] [-f archive] [files ...]
```

You must give exactly one of these options:

- `-l`: list the members of the archive.
- `-t`: test the archive. This computes the CRC16 of the directory and of each member and compares it with the stored value. Each line starts with `[OK]` if they match and `[XX]` if they do not.
- `-x`: extract the members. Each file is written into the current directory, or into the directory given with `-C`. The name of each member is printed as it is handled.

Other options:

- `-v`: verbose output. For `-l` this adds each member's creation timestamp (formatted as UTC, `YYYY-MM-DD_HH:MM:SS`) and its size. For `-t` and `-x` it also adds the stored and computed CRCs.
- `-f archive`: read the archive from this file. Without `-f`, the archive is read from standard input.
- `-C dir`: the directory to extract into. With `-x` or `-t`, this directory must already exist.

If an option is repeated, or if a second command is given, the usage line is printed and the exit status is 1. The same happens with an unknown option. If the archive cannot be opened, or its first directory entry is not a valid directory control entry, the command fails with a `FATAL:` message.

Member names are shown in lower case as `name.ext`. The directory control entry appears as `.`. Any remaining arguments are shell-style patterns, such as `*.doc`, that select which members to work on. The patterns are matched case-sensitively against the lower-case names.

When extracting, `unlu` decides whether a member is text or binary:

- A member counts as text when at most two of its bytes are neither printable nor white space. The last two bytes are not counted.
- For a text member, the trailing CP/M end-of-file marker (Ctrl-Z) and anything after it in the last two bytes are dropped.
- A binary member is written whole, at its recorded size.

Examples:

```
unlu -l -v -f games.lbr
unlu -t -f games.lbr
unlu -x -C out -f games.lbr '*.doc'
```

## Library use

```python
from unlu.archive import Archive
from unlu.directory import convert

with open("games.lbr", "rb") as stream:
    archive = Archive.read(stream, True)

for entry in archive.active_entries():
    member = convert(entry)
    print(member.name, member.size, archive.member_crc(entry) == member.crc)
```

Modules:

- `unlu.archive`:
  - `Archive.read(stream, load_data)` reads the directory, and the member data too when `load_data` is true.
  - `Archive.active_entries()` yields the active entries. It skips deleted ones and stops at the first unused one.
  - `Archive.directory_crc()` and `Archive.member_crc(entry)` compute checksums.
  - `Archive.member_bytes(member)` returns a member's raw data.
  - `match(patterns, name)` applies shell-style patterns.
  - `strip_text_eof(data)` applies the text/binary rule used on extraction.
  - Problems with the archive raise `ArchiveError`.
- `unlu.directory`:
  - `DirEntry` decodes and encodes the 32-byte directory entries with `from_bytes` and `to_bytes`.
  - `convert(entry)` turns an entry into a `Member` with offset, size, name, timestamps and CRC.
  - `convert_name(entry)` builds the lower-case file name. It raises `NameError_` for an entry that has an extension but no name.
- `unlu.crc16.crc16(data)` computes the CCITT CRC16 that the format uses.
- `unlu.dostime.dos_mktime(day, time)` converts an archive day count and packed DOS time into a POSIX timestamp. The epoch is local midnight on 1977-12-31.
- `unlu.cli.main(argv)` runs the command and returns its exit status.

## What it does not do

`unlu` only reads archives. It cannot create LU archives, or add, replace or delete members. It does not decompress members that were squeezed or crunched before they were stored; such members are extracted exactly as stored.
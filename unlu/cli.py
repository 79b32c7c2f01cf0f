"""Command line: list, test or extract the members of an LU (.lbr) archive."""

from __future__ import annotations

import getopt
import sys
import time
from pathlib import Path
from typing import BinaryIO

from .archive import Archive, ArchiveError, match, strip_text_eof
from .directory import DirEntry, Member, NameError_, convert

PROG = "unlu"
_USAGE = f"Usage: {PROG} [-C dir] [-l|-x|-t][-v][-f archive] [files ...]"


def _error(message: str) -> None:
    print(f"ERROR: {PROG} - {message}", file=sys.stderr)


def _fatal(message: str) -> int:
    print(f"FATAL: {PROG} - {message}", file=sys.stderr)
    return 1


def _usage() -> int:
    print(_USAGE, file=sys.stderr)
    return 1


def format_timestamp(timestamp: int) -> str:
    """Format a Unix timestamp as UTC "YYYY-MM-DD_HH:MM:SS"; empty if out of range."""
    try:
        return time.strftime("%Y-%m-%d_%H:%M:%S", time.gmtime(timestamp))
    except (OverflowError, OSError, ValueError):
        return ""


def format_list(member: Member, verbose: bool) -> str:
    """One line of the member listing."""
    prefix = ""
    if verbose:
        prefix = f"{format_timestamp(member.ctime)} {member.size:>8}  "
    return f"{prefix}{member.name[:14]:<14}"


def format_check(member: Member, computed: int, verbose: bool) -> str:
    """One line of the CRC check report."""
    verdict = "OK" if computed == member.crc else "XX"
    line = f"[{verdict}]  "
    if verbose:
        line += (
            f"[{member.crc:04X}/{computed:04x}]"
            f" {format_timestamp(member.ctime)} {member.size:>8}  "
        )
    return line + f"{member.name[:16]:<16}"


def _extract(archive: Archive, entry: DirEntry, member: Member,
             extract_dir: str, verbose: bool) -> None:
    if entry.first_sector != 0:
        target = Path(extract_dir) / member.name
        try:
            target.write_bytes(strip_text_eof(archive.member_bytes(member)))
        except OSError as exc:
            _error(
                f"couldn't open file '{member.name}' in directory "
                f"'{extract_dir}' ({exc.strerror})"
            )
    if verbose:
        print(format_check(member, archive.member_crc(entry), verbose))
    else:
        print(f"{member.name[:16]:<16}")


def _process(stream: BinaryIO, label: str, cmd: str, verbose: bool,
             extract_dir: str, patterns: list[str]) -> int:
    try:
        archive = Archive.read(stream, load_data=cmd != "l")
    except ArchiveError as exc:
        return _fatal(f"couldn't read the directory of archive '{label}' ({exc})")
    if cmd in ("x", "t") and not Path(extract_dir).is_dir():
        return _fatal(f"couldn't change directory to '{extract_dir}'")

    try:
        for entry in archive.active_entries():
            try:
                member = convert(entry)
            except NameError_:
                name = entry.name.decode("latin-1")
                ext = entry.ext.decode("latin-1")
                _error(f"couldn't convert lu archive member name ('{name}'(.)'{ext}').")
                continue
            if patterns and not match(patterns, member.name):
                continue
            if cmd == "l":
                print(format_list(member, verbose))
            elif cmd == "t":
                print(format_check(member, archive.member_crc(entry), verbose))
            else:
                _extract(archive, entry, member, extract_dir, verbose)
    except ArchiveError as exc:
        _error(str(exc))
    return 0


def main(argv=None) -> int:
    """Run the command; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, patterns = getopt.gnu_getopt(args, "hC:f:xtlv")
    except getopt.GetoptError:
        return _usage()

    cmd = None
    verbose = False
    file = None
    extract_dir = "."
    seen = set()
    for opt, value in opts:
        if opt in seen:
            return _usage()
        seen.add(opt)
        if opt in ("-t", "-l", "-x"):
            if cmd is not None:
                return _usage()
            cmd = opt[1]
        elif opt == "-v":
            verbose = True
        elif opt == "-f":
            file = value
        elif opt == "-C":
            extract_dir = value
        else:
            return _usage()
    if cmd is None:
        return _usage()

    if file is None:
        return _process(sys.stdin.buffer, "--stdin", cmd, verbose, extract_dir, patterns)
    try:
        stream = open(file, "rb")
    except OSError as exc:
        return _fatal(f"couldn't open file '{file}' ({exc.strerror})")
    with stream:
        return _process(stream, file, cmd, verbose, extract_dir, patterns)
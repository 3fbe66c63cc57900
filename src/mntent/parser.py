"""
fstab parser: one MountEntry per non-comment, non-blank line.

parse() opens a file, parse_lines() walks any iterable of lines, and
parse_line() handles a single line. Errors carry the source path and
line number once they leave parse_lines().
"""

import os
import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import FieldCountError, MntentError, NumberFormatError, ReadError
from .schema import FIELD_COUNT, MAX_FIELD_VALUE, MountEntry

_DEBUG = bool(os.environ.get("MNTENT_DEBUG", ""))

# ASCII whitespace only; U+00A0 and \v are ordinary field characters
_SPLIT_RE = re.compile(r"[\t\n\f\r ]+")
_DIGITS_RE = re.compile(r"[0-9]+")

# Octal escapes fstab(5) uses for characters that would break field splitting
_ESCAPES = {
    "011": "\t",
    "012": "\n",
    "040": " ",
    "134": "\\",
}
_ESCAPE_RE = re.compile(r"\\(011|012|040|134)")


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[mntent] {msg}", file=sys.stderr)


def unescape(value: str) -> str:
    """Decode \\011, \\012, \\040 and \\134. Each escape is decoded exactly once."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], value)


def parse_uint31(value: str) -> int:
    """Parse an unsigned decimal that fits in 31 bits. Raises ValueError."""
    if not _DIGITS_RE.fullmatch(value):
        raise ValueError(f'parsing "{value}": invalid syntax')
    if len(value.lstrip("0")) > len(str(MAX_FIELD_VALUE)):
        raise ValueError(f'parsing "{value}": value out of range')
    num = int(value.lstrip("0") or "0")
    if num > MAX_FIELD_VALUE:
        raise ValueError(f'parsing "{value}": value out of range')
    return num


def _parse_number(value: str, field: str) -> int:
    try:
        return parse_uint31(value)
    except ValueError as exc:
        raise NumberFormatError(field, value, str(exc)) from exc


def parse_line(raw_line: str) -> Optional[MountEntry]:
    """Parse one line. Returns None for blank and comment lines."""
    line = raw_line.strip()
    if not line or line.startswith("#"):
        return None

    fields = _SPLIT_RE.split(line)
    if len(fields) != FIELD_COUNT:
        raise FieldCountError(FIELD_COUNT, len(fields))

    return MountEntry(
        name=unescape(fields[0]),
        directory=unescape(fields[1]),
        types=unescape(fields[2]).split(","),
        options=unescape(fields[3]).split(","),
        dump_frequency=_parse_number(fields[4], "dump frequency"),
        pass_number=_parse_number(fields[5], "pass number"),
    )


def parse_lines(lines: Iterable[str], source: str = "<string>") -> List[MountEntry]:
    """Parse an iterable of lines; the first malformed line aborts the whole parse."""
    entries: List[MountEntry] = []
    for lineno, line in enumerate(lines, start=1):
        try:
            entry = parse_line(line)
        except MntentError as exc:
            exc.locate(source, lineno)
            raise
        if entry is not None:
            entries.append(entry)
    return entries


def parse(path: Union[str, "os.PathLike[str]"]) -> List[MountEntry]:
    """Parse the fstab-format file at path."""
    source = os.fspath(path)
    _debug(f"parsing {source}")
    try:
        # newline="\n": only LF ends a line; a stray CR is stripped as whitespace
        with open(source, encoding="utf-8", newline="\n") as f:
            entries = parse_lines(f, source)
    except MntentError as exc:
        _debug(f"failed: {exc}")
        raise
    except (OSError, UnicodeDecodeError) as exc:
        _debug(f"cannot read {source}: {exc}")
        raise ReadError(getattr(exc, "strerror", None) or str(exc)).locate(source) from exc
    _debug(f"parsed {len(entries)} entries from {source}")
    return entries


def parse_host_fstab(host_root: Union[str, Path]) -> List[MountEntry]:
    """Parse etc/fstab under a mounted host root (e.g. /host or /)."""
    return parse(Path(host_root) / "etc/fstab")

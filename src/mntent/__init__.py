"""
Parse mount tables in the /etc/fstab line format into MountEntry records.
"""

from .errors import FieldCountError, LineError, MntentError, NumberFormatError, ReadError
from .parser import parse, parse_host_fstab, parse_line, parse_lines, unescape
from .schema import MountEntry

__all__ = [
    "FieldCountError",
    "LineError",
    "MntentError",
    "MountEntry",
    "NumberFormatError",
    "ReadError",
    "parse",
    "parse_host_fstab",
    "parse_line",
    "parse_lines",
    "unescape",
]

"""Errors raised while reading and parsing a mount table."""

from typing import Optional


class MntentError(Exception):
    """Base class. path/lineno are filled in once the failing line is known."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.path: Optional[str] = None
        self.lineno: Optional[int] = None

    def locate(self, path: str, lineno: Optional[int] = None) -> "MntentError":
        self.path = path
        self.lineno = lineno
        return self

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        if self.lineno is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.lineno}: {self.message}"


class ReadError(MntentError):
    """The source could not be opened or read. The OS error is the __cause__."""


class LineError(MntentError, ValueError):
    """A non-comment, non-blank line is malformed."""


class FieldCountError(LineError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Each line must consist of {expected} fields but got {actual}")
        self.expected = expected
        self.actual = actual


class NumberFormatError(LineError):
    def __init__(self, field: str, value: str, reason: str) -> None:
        super().__init__(f"Can't parse {field} field: {reason}")
        self.field = field
        self.value = value
        self.reason = reason

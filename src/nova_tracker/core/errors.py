# src/nova_tracker/core/errors.py

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Every failure the tracker reports to the user falls into one of these."""

    UNKNOWN_COMMAND = "UnknownCommand"
    FORMAT_ERROR = "FormatError"
    EMPTY_DESCRIPTION = "EmptyDescription"
    EMPTY_KEYWORD = "EmptyKeyword"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    PARSE_ERROR = "ParseError"
    STORAGE_ERROR = "StorageError"


class TrackerError(Exception):
    """Base error: an explicit kind plus a message fit for the user."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {self.message!r})"


class CommandError(TrackerError):
    """Malformed input, unknown keyword or bad argument. Recoverable."""


class TaskParseError(TrackerError):
    """One persisted line could not be decoded."""

    def __init__(self, message: str, *, line_no: int | None = None, line: str = "") -> None:
        super().__init__(ErrorKind.PARSE_ERROR, message)
        self.line_no = line_no
        self.line = line


class StorageError(TrackerError):
    """The backing file could not be read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.STORAGE_ERROR, message)

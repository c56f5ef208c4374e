# src/nova_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the console and the file system swappable and makes testing easier.
"""

from pathlib import Path
from typing import Protocol


class LineSource(Protocol):
    """Blocking source of user commands, one line per call."""

    def read_line(self) -> str | None:
        """Return the next trimmed line, or None once input is exhausted."""
        ...


class OutputSink(Protocol):
    def write_line(self, text: str) -> None: ...


class FileStore(Protocol):
    """
    Byte-durable storage for whole files.

    Implementations raise OSError on failure; callers decide how to report it.
    """

    def ensure_dir(self, path: Path) -> None: ...

    def read_text(self, path: Path) -> str | None:
        """Return the file contents, or None when the file does not exist."""
        ...

    def write_text(self, path: Path, text: str) -> None: ...

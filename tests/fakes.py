# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class FakeFileStore:
    """
    In-memory FileStore.

    - `files` maps path -> text
    - `fail_writes` / `fail_reads` make the next calls raise OSError
    """

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.dirs: set[Path] = set()
        self.writes = 0
        self.fail_writes = False
        self.fail_reads = False

    def ensure_dir(self, path: Path) -> None:
        self.dirs.add(Path(path))

    def read_text(self, path: Path) -> str | None:
        if self.fail_reads:
            raise OSError("disk unreadable")
        return self.files.get(Path(path))

    def write_text(self, path: Path, text: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.files[Path(path)] = text


class FakeLineSource:
    """Scripted LineSource: yields the given lines, then None (end of input)."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)

    def read_line(self) -> str | None:
        if not self._lines:
            return None
        return self._lines.pop(0).strip()


class ListSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

# src/nova_tracker/tasks/file_store.py

from __future__ import annotations

import os
from pathlib import Path


class LocalFileStore:
    """FileStore backed by the local file system (UTF-8 text)."""

    def ensure_dir(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def read_text(self, path: Path) -> str | None:
        try:
            return Path(path).read_text("utf-8")
        except FileNotFoundError:
            return None

    def write_text(self, path: Path, text: str) -> None:
        # Write next to the target and swap in, so a crash never leaves half a file.
        path = Path(path)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp.write_text(text, "utf-8")
            os.replace(tmp, path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

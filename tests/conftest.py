# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from nova_tracker.core.state import AppState
from nova_tracker.tasks.task_list import TaskList
from nova_tracker.tasks.task_store import TaskStore

from .fakes import FakeFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Nova",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "Nova.txt",
        log_path=data_dir / "nova.log",
    )


@pytest.fixture()
def files() -> FakeFileStore:
    return FakeFileStore()


@pytest.fixture()
def state(settings: SimpleNamespace, files: FakeFileStore) -> AppState:
    """
    AppState over an in-memory file store, starting with an empty task list.
    """
    return AppState(
        settings=settings,
        tasks=TaskList(),
        store=TaskStore(files, settings.tasks_path),
    )

# src/nova_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the tasks file directory exists (via TaskStore.load),
- wires the file store and codec into AppState,
- loads the saved task list (best-effort).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.ports import FileStore
from ..core.state import AppState
from ..tasks.file_store import LocalFileStore
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, files: FileStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and the file store are injectable for tests; they default to
    get_settings() and the local file system.
    """
    if settings is None:
        settings = get_settings()
    if files is None:
        files = LocalFileStore()

    store = TaskStore(files, settings.tasks_path)
    state = AppState(settings=settings, tasks=TaskList(), store=store)

    try:
        loaded = store.load()
    except StorageError:
        logger.exception("Failed to load tasks from %s; starting with an empty list.", store.path)
        return state

    state.tasks = loaded.tasks
    state.load_errors = loaded.errors
    return state

# src/nova_tracker/core/session.py

"""
One read-dispatch-execute cycle.

`handle_line` is the single place where TrackerError exceptions are caught
and folded into an Outcome, so connectors only ever render values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.commands import parse_command
from .errors import StorageError, TrackerError
from .executor import apply
from .operations import Farewell, Result
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Outcome:
    result: Result | None = None
    error: TrackerError | None = None
    # Set when the mutation succeeded in memory but could not be written.
    storage_error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit(self) -> bool:
        return isinstance(self.result, Farewell)


def handle_line(state: AppState, line: str) -> Outcome:
    """
    Parse `line`, apply it to state.tasks and save the whole list if it changed.

    A failed save does not undo the in-memory change: memory stays ahead of
    disk until the next successful save.
    """
    try:
        op = parse_command(line)
        result, persist = apply(state.tasks, op)
    except TrackerError as e:
        logger.info("Command rejected (%s): %s", e.kind.value, e.message)
        return Outcome(error=e)

    if not persist:
        return Outcome(result=result)

    try:
        state.store.save(state.tasks)
    except StorageError as e:
        logger.warning("Tasks changed in memory but were not saved: %s", e.message)
        return Outcome(result=result, storage_error=e)

    return Outcome(result=result)

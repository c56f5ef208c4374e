# tests/test_session.py

from __future__ import annotations

from pathlib import Path

from nova_tracker.core.errors import ErrorKind
from nova_tracker.core.operations import Added, Farewell, Found, Removed
from nova_tracker.core.session import handle_line
from nova_tracker.core.state import AppState
from nova_tracker.tasks.task_models import Deadline, Event, Todo

from .fakes import FakeFileStore


def _saved(files: FakeFileStore, state: AppState) -> str:
    return files.files[Path(state.store.path)]


def test_todo_adds_and_persists(state: AppState, files: FakeFileStore) -> None:
    outcome = handle_line(state, "todo Buy milk")
    assert outcome.ok
    assert outcome.result == Added(task=Todo("Buy milk"), size=1)
    assert _saved(files, state) == "T | 0 | Buy milk\n"


def test_deadline_persisted_without_prefix(state: AppState, files: FakeFileStore) -> None:
    handle_line(state, "deadline Submit report /by 2024-12-01")
    assert list(state.tasks) == [Deadline("Submit report", "by: 2024-12-01")]
    assert _saved(files, state) == "D | 0 | Submit report | 2024-12-01\n"


def test_event_fields_in_memory(state: AppState) -> None:
    handle_line(state, "event Team sync /from Mon 10am /to Mon 11am")
    assert list(state.tasks) == [Event("Team sync", "from: Mon 10am", "to: Mon 11am")]


def test_mark_then_unmark_persists_both_times(state: AppState, files: FakeFileStore) -> None:
    handle_line(state, "todo Buy milk")
    writes = files.writes

    handle_line(state, "mark 1")
    assert _saved(files, state) == "T | 1 | Buy milk\n"
    handle_line(state, "unmark 1")
    assert _saved(files, state) == "T | 0 | Buy milk\n"

    assert files.writes == writes + 2
    assert list(state.tasks) == [Todo("Buy milk", done=False)]


def test_delete_only_task(state: AppState, files: FakeFileStore) -> None:
    handle_line(state, "todo Buy milk")
    outcome = handle_line(state, "delete 1")
    assert outcome.result == Removed(task=Todo("Buy milk"), size=0)
    assert _saved(files, state) == ""


def test_find_does_not_write(state: AppState, files: FakeFileStore) -> None:
    handle_line(state, "todo Buy milk")
    writes = files.writes

    hit = handle_line(state, "find mil")
    miss = handle_line(state, "find xyz")

    assert isinstance(hit.result, Found)
    assert [t.description for t in hit.result.tasks] == ["Buy milk"]
    assert isinstance(miss.result, Found)
    assert miss.result.tasks == []
    assert files.writes == writes


def test_command_errors_become_outcomes(state: AppState, files: FakeFileStore) -> None:
    outcome = handle_line(state, "mark 1")
    assert not outcome.ok
    assert outcome.error is not None
    assert outcome.error.kind is ErrorKind.INDEX_OUT_OF_RANGE
    assert outcome.result is None
    assert files.writes == 0

    assert handle_line(state, "blah").error.kind is ErrorKind.UNKNOWN_COMMAND


def test_failed_save_keeps_mutation_and_reports(state: AppState, files: FakeFileStore) -> None:
    files.fail_writes = True
    outcome = handle_line(state, "todo Buy milk")

    assert outcome.ok
    assert outcome.result == Added(task=Todo("Buy milk"), size=1)
    assert outcome.storage_error is not None
    assert outcome.storage_error.kind is ErrorKind.STORAGE_ERROR
    assert len(state.tasks) == 1

    # Next successful save catches the disk up.
    files.fail_writes = False
    handle_line(state, "todo Walk dog")
    assert _saved(files, state) == "T | 0 | Buy milk\nT | 0 | Walk dog\n"


def test_bye_signals_exit(state: AppState) -> None:
    outcome = handle_line(state, "bye")
    assert outcome.exit
    assert outcome.result == Farewell()
    assert not handle_line(state, "list").exit


def test_parsed_tasks_survive_save_and_load(state: AppState) -> None:
    handle_line(state, "deadline Submit report  /by Fri")
    handle_line(state, "event Sync /from Mon  /to Tue")
    handle_line(state, "todo   spaced   out")

    assert list(state.tasks)[:2] == [
        Deadline("Submit report", "by: Fri"),
        Event("Sync", "from: Mon", "to: Tue"),
    ]
    assert state.store.load().tasks == state.tasks

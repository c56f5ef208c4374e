# src/nova_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.operations import Added, Farewell, Found, Listed, Marked, Removed, Result
from ..core.ports import LineSource, OutputSink
from ..core.session import Outcome, handle_line
from ..core.state import AppState
from ..tasks.task_models import format_task

logger = logging.getLogger(__name__)

SEPARATOR = "_" * 60


class StdinLineSource:
    """LineSource over input(); EOF and Ctrl+C both end the session."""

    def __init__(self, prompt: str = "") -> None:
        self._prompt = prompt

    def read_line(self) -> str | None:
        try:
            return input(self._prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return None
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            return None


class StdoutSink:
    def write_line(self, text: str) -> None:
        print(text, flush=True)


def _count_line(size: int) -> str:
    return f"Now you have {size} tasks in the list."


def render_result(result: Result) -> list[str]:
    match result:
        case Added(task=task, size=size):
            return ["Got it. I've added this task:", f"   {format_task(task)}", _count_line(size)]
        case Removed(task=task, size=size):
            return ["Noted. I've removed this task:", f"   {format_task(task)}", _count_line(size)]
        case Marked(task=task, done=done):
            head = (
                " Nice! I've marked this task as done:"
                if done
                else " OK, I've marked this task as not done yet:"
            )
            return [head, f"   {format_task(task)}"]
        case Listed(tasks=tasks):
            lines = ["Here are the tasks in your list:"]
            lines += [f" {i}. {format_task(t)}" for i, t in enumerate(tasks, start=1)]
            return lines
        case Found(tasks=tasks):
            lines = ["Here are the matching tasks in your list:"]
            lines += [f" {i}.{format_task(t)}" for i, t in enumerate(tasks, start=1)]
            return lines
        case Farewell():
            return ["Bye. Hope to see you again soon!"]
    raise TypeError(f"Unsupported result: {result!r}")


def render_outcome(outcome: Outcome) -> list[str]:
    """Lines to print for one handled command (without the separator frame)."""
    if outcome.error is not None:
        return [f"OOPS!!! {outcome.error.message}"]

    lines = render_result(outcome.result) if outcome.result is not None else []
    if outcome.storage_error is not None:
        lines.append(f"OOPS!!! {outcome.storage_error.message}")
    return lines


def _write_framed(sink: OutputSink, lines: list[str]) -> None:
    sink.write_line(SEPARATOR)
    for line in lines:
        sink.write_line(line)
    sink.write_line(SEPARATOR)


def run_console_loop(state: AppState, source: LineSource, sink: OutputSink) -> None:
    """Read commands until `bye` or end of input; render each reply."""
    app_name = str(getattr(state.settings, "app_name", "Nova"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    welcome = [f"Hello! I'm {app_name}", "What can I do for you?"]
    if state.load_errors:
        welcome.append(
            f"({len(state.load_errors)} unreadable line(s) in the tasks file were skipped.)"
        )
    _write_framed(sink, welcome)

    while True:
        line = source.read_line()
        if line is None:
            break
        if not line:
            continue

        outcome = handle_line(state, line)
        _write_framed(sink, render_outcome(outcome))

        if outcome.exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")

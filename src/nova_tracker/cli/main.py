# src/nova_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the saved tasks file, then runs
the console REPL in the main thread until `bye` or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import StdinLineSource, StdoutSink, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_file=settings.log_path, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    run_console_loop(state, StdinLineSource(), StdoutSink())

    logger.info("Bye.")


if __name__ == "__main__":
    main()

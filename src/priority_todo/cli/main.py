# src/priority_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menus in the
main thread. An open list is always saved on the way out.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.task_models import StoreInitError, TaskFileError

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Save and release whatever list is still open."""
    session = state.session
    if session is None:
        return
    try:
        session.close(save=True)
    except TaskFileError:
        logger.exception("Failed to save %s on shutdown.", session.path)
    finally:
        state.session = None


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    state = AppState(settings=settings)

    try:
        run_console_loop(state)
    except StoreInitError:
        logger.exception("Failed to allocate task storage. Exiting program.")
        print("Failed to allocate memory. Exiting program.", file=sys.stderr)
        return 1
    finally:
        _shutdown(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# src/priority_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_COMMANDS, Prompter
from ..cli.commands import registry as command_registry
from ..core.state import AppState, TodoSession, resolve_list_path
from ..tasks.task_models import CapacityError, TaskFileError

Printer = Callable[[str], None]

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "\nTo navigate further into the program, type one of the following commands:\n"
    "\topen: view existing to-do list.\n"
    "\tcreate: create new to-do list.\n"
    "\texit: exit program."
)

SESSION_MENU = (
    "\nWelcome to the task manager. Listed below are commands to navigate it.\n"
    "list: prints the formatted to-do list.\n"
    "add: add task to the list.\n"
    "delete: delete task from the list.\n"
    "save: save current to-do list state.\n"
    "exit: exit the task manager."
)


def _close_session(state: AppState, out: Printer) -> None:
    session = state.session
    if session is None:
        return
    try:
        session.close(save=True)
        out(f"\tSaved {session.path}.")
    except TaskFileError as e:
        logger.warning("Save on exit failed: %s", e)
        out(f"\tError saving list: {e}")
    finally:
        state.session = None


def run_list_session(state: AppState, session: TodoSession, ask: Prompter, out: Printer) -> None:
    """Command loop for one open list. Always saves on the way out."""
    state.session = session
    logger.info("List session started path=%s", session.path)
    out(SESSION_MENU)

    try:
        while True:
            try:
                line = ask("\nEnter command to execute: ").strip()
            except EOFError:
                logger.info("Console EOF received, closing list.")
                break

            if not line:
                continue

            if line.lower() in EXIT_COMMANDS:
                break

            try:
                reply = command_registry.handle(session, line, ask)
            except EOFError:
                logger.info("Console EOF received mid-command, closing list.")
                break

            if reply is not None:
                out(reply)
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, closing list.")
        out("")
    finally:
        _close_session(state, out)


def _ask_filename(ask: Prompter, prompt: str) -> str:
    return ask(prompt).strip()


def open_list(state: AppState, ask: Prompter, out: Printer) -> TodoSession | None:
    filename = _ask_filename(ask, "\nEnter the to-do file name to open: ")
    if not filename:
        out("\nInvalid filename entered.")
        return None

    path = resolve_list_path(state.settings, filename)
    try:
        session = TodoSession.open(path, state.settings)
    except (TaskFileError, CapacityError) as e:
        logger.warning("Open failed: %s", e)
        out(f"Error opening file: {e}")
        return None

    if session.load_error is not None:
        out(
            "Error, file's formatting is off: "
            f"{session.load_error}. Kept the {session.store.count} tasks read before it."
        )
    return session


def create_list(state: AppState, ask: Prompter, out: Printer) -> TodoSession | None:
    filename = _ask_filename(ask, "\nEnter name for to-do list file to be named: ")
    if not filename:
        out("\nInvalid filename entered.")
        return None
    return TodoSession.create(resolve_list_path(state.settings, filename), state.settings)


def run_console_loop(state: AppState, ask: Prompter = input, out: Printer = print) -> None:
    app_name = str(getattr(state.settings, "app_name", "priority-todo"))
    logger.info("Console started.")
    out(f"Hello, welcome to {app_name}!")

    while True:
        out(MAIN_MENU)
        try:
            choice = ask("> ").strip().lower()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if choice == "exit":
            break

        try:
            if choice == "open":
                session = open_list(state, ask, out)
            elif choice == "create":
                session = create_list(state, ask, out)
            else:
                out("\nInvalid command entered.")
                continue
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed while choosing a file, exiting.")
            break

        if session is not None:
            run_list_session(state, session, ask, out)

    logger.info("Console finished.")

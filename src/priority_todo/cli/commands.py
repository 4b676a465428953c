# src/priority_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import TodoSession
from ..tasks.task_models import InvalidPriorityError, Priority, TaskFileError

Prompter = Callable[[str], str]
CommandHandler = Callable[[TodoSession, list[str], Prompter], str]

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")

PRIORITY_PROMPT = (
    "\nEnter priority status\n"
    "\t1: high priority\n"
    "\t2: medium priority\n"
    "\t3: low priority.\n"
)


class CommandRegistry:
    """Word-command registry for an open list (list, add, delete, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, session: TodoSession, line: str, ask: Prompter) -> str | None:
        """
        Handle a line like "add" or "delete".
        Returns the reply, or None for a blank line.
        """
        parts = line.split()
        if not parts:
            return None

        name = parts[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return "\tInvalid command entered."
        return handler(session, parts[1:], ask)

    def build_help(self) -> str:
        lines = ["Commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name}: {help_text}")
        lines.append("  exit: save and close this list.")
        return "\n".join(lines)


registry = CommandRegistry()


def format_tasks(session: TodoSession) -> str:
    tasks = session.list_tasks()
    lines = [f"\nTotal Tasks: {len(tasks)}"]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"\tTask {i}: {task.name}; priority: {task.priority}")
    return "\n".join(lines)


def cmd_help(session: TodoSession, args: list[str], ask: Prompter) -> str:
    return registry.build_help()


def cmd_list(session: TodoSession, args: list[str], ask: Prompter) -> str:
    return format_tasks(session)


def cmd_add(session: TodoSession, args: list[str], ask: Prompter) -> str:
    name = ask("\tEnter task name: ").strip()
    if not name:
        return "\tTask name cannot be empty."

    try:
        priority = Priority.parse(ask(PRIORITY_PROMPT))
    except InvalidPriorityError as e:
        return f"\tInvalid input. {e}"

    if not session.add(name, priority):
        return "\tTask not added: the list is full."
    return "\tTask added."


def cmd_delete(session: TodoSession, args: list[str], ask: Prompter) -> str:
    name = ask("\tEnter task name to delete: ").strip()
    if session.delete(name):
        return "\tTask deleted."
    return "\tTask not found."


def cmd_save(session: TodoSession, args: list[str], ask: Prompter) -> str:
    try:
        written = session.save()
    except TaskFileError as e:
        logger.warning("Save failed: %s", e)
        return f"\tError saving list: {e}"
    return f"\tSaved {written} tasks to {session.path}."


registry.register("list", cmd_list, help_text="print the list, most urgent first.", aliases=["ls"])
registry.register("add", cmd_add, help_text="add a task to the list.")
registry.register("delete", cmd_delete, help_text="delete a task by name.", aliases=["del", "rm"])
registry.register("save", cmd_save, help_text="save the list to its file.")
registry.register("help", cmd_help, help_text="show this help.", aliases=["h", "?"])

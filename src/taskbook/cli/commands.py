# src/taskbook/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.done else " "
    return f"#{task.id} [{mark}] {task.title}"


def _parse_id(args: list[str], usage: str) -> int | str:
    """Return the task id, or a reply string explaining what is wrong."""
    if not args:
        return usage
    raw = args[0]
    if not raw.isdecimal():
        return f"Invalid task id: {raw}"
    return int(raw)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /add <title>"
    title = " ".join(args)
    task_id = state.task_store.create(title)
    logger.info("Added task id=%s", task_id)
    return f"Added task #{task_id}: {title}"


def cmd_get(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args, "Usage: /get <id>")
    if isinstance(task_id, str):
        return task_id
    task = state.task_store.get(task_id)
    if task is None:
        return f"Task #{task_id} not found."
    return format_task(task)


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list()
    if not tasks:
        return "No tasks yet."
    return "\n".join(format_task(t) for t in tasks)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args, "Usage: /done <id>")
    if isinstance(task_id, str):
        return task_id
    if not state.task_store.mark_done(task_id):
        return f"Task #{task_id} not found."
    logger.info("Marked task done id=%s", task_id)
    return f"Task #{task_id} marked done."


def cmd_delete(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /delete <id>  -> remove the task for good (its id is never reused)
    """
    task_id = _parse_id(args, "Usage: /delete <id>")
    if isinstance(task_id, str):
        return task_id

    task = state.task_store.delete(task_id)
    if task is None:
        return f"Task #{task_id} not found."

    logger.info("Deleted task id=%s", task_id)
    if emit is not None and not task.done:
        emit(f"Note: task #{task_id} was still pending.")
    return f"Deleted task #{task_id}: {task.title}"


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    total = store.count_tasks()
    done = store.count_done()
    app_name = str(getattr(state.settings, "app_name", "taskbook"))
    locking = "ON" if getattr(state.settings, "thread_safe", False) else "OFF"
    return (
        f"{app_name} status:\n"
        f"  Tasks: {total} ({done} done, {total - done} pending)\n"
        f"  Next id: {store.next_id}\n"
        f"  Locking: {locking}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.", aliases=["new"])
registry.register("get", cmd_get, help_text="Show one task: /get <id>.", aliases=["show"])
registry.register("list", cmd_list, help_text="List all tasks in creation order.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task done: /done <id>.")
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"]
)
registry.register("status", cmd_status, help_text="Show task counts and settings.")

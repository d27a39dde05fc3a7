# src/todoz/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..pomodoro import run_pomodoro
from ..tasks.errors import ErrorKind, InvalidArgument, TodozError, format_task_id
from .render import feedback, render_help, render_task_list

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, str | None, CommandEmitter | None], str]

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"
DEFAULT_COMMAND = "list"

_TASK_ID_RE = re.compile(r"\+?[0-9]+", re.ASCII)
MAX_TASK_ID = 2**32 - 1


def parse_command_line(line: str) -> tuple[str, str | None]:
    """
    Split a raw input line into (command, argument).

    The line is trimmed and split on the first space only, so everything after
    the command is one argument ("add buy oat milk" -> ("add", "buy oat milk")).
    A missing or blank argument is None. An empty line maps to the list command.
    """
    line = line.strip()
    if not line:
        return DEFAULT_COMMAND, None

    name, _, rest = line.partition(" ")
    arg = rest.strip()
    return name, (arg or None)


def parse_task_id(arg: str | None, missing_hint: str) -> int:
    if arg is None:
        raise InvalidArgument(missing_hint)
    if not _TASK_ID_RE.fullmatch(arg) or int(arg) > MAX_TASK_ID:
        raise InvalidArgument("Please provide a valid task number")
    return int(arg)


class CommandRegistry:
    """Registry for the REPL commands (list, add, x, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
    ) -> None:
        self._handlers[name] = handler
        self._help[name] = help_text

    def describe(self, name: str, help_text: str) -> None:
        """Add a help entry for a command handled outside the registry (quit)."""
        self._help[name] = help_text

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str:
        """
        Handle one input line and return the text to show.

        Expected errors (TodozError) are rendered here as a single line; anything
        else propagates to the caller.
        """
        name, arg = parse_command_line(line)

        handler = self._handlers.get(name)
        if not handler:
            return feedback(f"'{name}' is not recognized. Try 'help' for guidance", "💭")

        try:
            return handler(state, arg, emit)
        except TodozError as e:
            if e.kind is ErrorKind.INVALID_ARGUMENT:
                return feedback(e.message, "💭")
            logger.info("Command %r failed: %s (%s)", name, e.message, e.kind)
            return feedback(e.message, "⚠️")

    def help_entries(self) -> list[tuple[str, str]]:
        return list(self._help.items())

    def build_help(self) -> str:
        return render_help(self.help_entries())


registry = CommandRegistry()


def cmd_list(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    return render_task_list(state.task_store.tasks)


def cmd_add(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    if arg is None:
        raise InvalidArgument("Please describe your task")
    state.task_store.add(arg)
    return feedback("Task added successfully", "✨") + "\n" + cmd_list(state, None)


def cmd_toggle(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    task_id = parse_task_id(arg, "Which task? (provide the task number)")
    state.task_store.toggle(task_id)
    return feedback(f"Task {format_task_id(task_id)} updated", "✅") + "\n" + cmd_list(state, None)


def cmd_remove(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    task_id = parse_task_id(arg, "Which task to remove? (provide the task number)")
    state.task_store.remove(task_id)
    return feedback(f"Task {format_task_id(task_id)} removed", "🗑️") + "\n" + cmd_list(state, None)


def cmd_remove_all(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    """
    Clear every task after an explicit confirmation.

    Only "y" (any case, surrounding whitespace ignored) confirms; "yes" does not.
    """
    try:
        answer = state.prompt(feedback("Remove all tasks? This cannot be undone (y/n): ", "🤔"))
    except EOFError:
        answer = ""

    if answer.strip().lower() != "y":
        return feedback("No changes made", "✋")

    state.task_store.clear()
    return feedback("All tasks cleared - fresh start!", "🧹")


def cmd_pomodoro(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    minutes = int(getattr(state.settings, "pomodoro_minutes", 25))
    if emit is None:
        run_pomodoro(minutes)
    else:
        run_pomodoro(minutes, write=emit)
    return ""


def cmd_help(state: AppState, arg: str | None, emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


registry.register("list", cmd_list, help_text="view your tasks")
registry.register("add", cmd_add, help_text="create a new task")
registry.register("x", cmd_toggle, help_text="toggle task completion")
registry.register("rm", cmd_remove, help_text="remove a task")
registry.register("rm-all", cmd_remove_all, help_text="remove all tasks")
registry.register("pom", cmd_pomodoro, help_text="start a focus timer")
registry.register("help", cmd_help, help_text="show this guidance")
registry.describe(QUIT_COMMAND, "exit peacefully")

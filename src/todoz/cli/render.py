# src/todoz/cli/render.py

"""
Plain-text rendering for the console.

Everything here returns strings; printing is the connector's job.
"""

from __future__ import annotations

from ..tasks.errors import format_task_id
from ..tasks.task_models import PROGRESS_SLOTS, Progress, Task

SUBTLE_LINE = "  " + " ".join("─" * 28)

DONE_SYMBOL = "✓"
OPEN_SYMBOL = "◯"


def feedback(message: str, emoji: str = "") -> str:
    """One indented feedback line, optionally prefixed by an emoji."""
    if emoji:
        return f"    {emoji} {message}"
    return f"    {message}"


def render_task(task: Task) -> str:
    symbol = DONE_SYMBOL if task.completed else OPEN_SYMBOL
    return f"  {format_task_id(task.id)} {symbol}   {task.description}"


def render_progress(progress: Progress) -> str:
    filled = progress.filled_slots
    bar = "●" * filled + "○" * (PROGRESS_SLOTS - filled)
    return f"    Progress: {bar} {progress.percent}%"


def render_task_list(tasks: list[Task]) -> str:
    if not tasks:
        return "\n".join(
            [
                "",
                "    ✨ Your space is clear and ready",
                "       Add a task when inspiration strikes",
                "",
            ]
        )

    lines = ["", render_progress(Progress.of(tasks)), SUBTLE_LINE]
    lines.extend(render_task(t) for t in tasks)
    lines.append("")
    return "\n".join(lines)


def render_help(entries: list[tuple[str, str]]) -> str:
    lines = ["", "  ✨ Simple commands for mindful productivity:", ""]
    for name, help_text in entries:
        lines.append(f"    {name:<12}  {help_text}")
    lines.extend(["", SUBTLE_LINE, ""])
    return "\n".join(lines)


def render_welcome() -> str:
    return "\n".join(
        [
            "",
            "    ╭───────────────────────────────────────────╮",
            "    │                                           │",
            "    │               ✨  todoz  ✨               │",
            "    │                                           │",
            "    │        mindful task management            │",
            "    │                                           │",
            "    ╰───────────────────────────────────────────╯",
            "",
            "      Begin with 'list' to see your tasks 📋",
            "      or 'help' for gentle guidance ❓",
            "",
        ]
    )


def render_goodbye() -> str:
    return "\n".join(
        [
            "",
            feedback("Thank you for staying organized ✨", "👋"),
            "      Until next time, stay mindful",
            "",
        ]
    )

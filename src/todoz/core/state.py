# src/todoz/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore

# Reads one line of user input after showing the given prompt (like input()).
# Must raise EOFError when input is exhausted.
Prompt = Callable[[str], str]


@dataclass
class AppState:
    # Settings object (todoz.config.Settings or a test double with the same attributes).
    settings: object

    task_store: TaskStore
    prompt: Prompt = field(default=input)

# src/todoz/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the TaskStore on the configured path,
- loads existing tasks, degrading to an empty list when the file is unusable.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState, Prompt
from ..tasks.errors import TodozError
from ..tasks.task_store import TaskStore
from .render import feedback

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, prompt: Prompt | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.todos_path)
    if prompt is None:
        return AppState(settings=settings, task_store=store)
    return AppState(settings=settings, task_store=store, prompt=prompt)


def load_tasks(state: AppState) -> str | None:
    """
    Load persisted tasks into state.task_store.

    Returns a warning line to show the user when loading failed (the store is
    then empty), or None on success.
    """
    store = state.task_store
    try:
        store.load()
    except TodozError as e:
        logger.warning("Unable to load tasks from %s (%s): %s", store.path, e.kind, e.message)
        store.tasks = []
        return feedback(f"Unable to load tasks: {e.message}", "⚠️")
    return None

# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todoz.core.state import AppState
from todoz.tasks.task_store import TaskStore

from .fakes import ScriptedPrompt


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "todoz-home"
    return SimpleNamespace(
        app_name="todoz-test",
        log_level="WARNING",
        log_file=None,
        data_dir=data_dir,
        todos_path=data_dir / "todos.json",
        pomodoro_minutes=1,
    )


@pytest.fixture()
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture()
def state(settings: SimpleNamespace, prompt: ScriptedPrompt) -> AppState:
    """
    AppState with a real TaskStore on a per-test temp path.

    NOTE: The store writes real files here because the on-disk format is part
    of what we want to test.
    """
    return AppState(settings=settings, task_store=TaskStore(settings.todos_path), prompt=prompt)

# tests/test_console_connector.py

from __future__ import annotations

from todoz.cli.commands import CommandRegistry
from todoz.connectors.console_connector import PROMPT, run_console_loop


def test_loop_runs_commands_until_quit(state, prompt, capsys) -> None:
    prompt.lines.extend(["add buy milk", "add walk dog", "x 1", "quit", "add never"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Task added successfully" in out
    assert "Task 01 updated" in out
    assert [(t.description, t.completed) for t in state.task_store.tasks] == [
        ("buy milk", True),
        ("walk dog", False),
    ]
    # input after quit is never read
    assert prompt.lines == ["add never"]
    assert prompt.prompts == [PROMPT] * 4


def test_loop_ends_on_eof(state, prompt, capsys) -> None:
    prompt.lines.append("add only one")

    run_console_loop(state)

    assert len(state.task_store.tasks) == 1


def test_loop_survives_store_errors(state, prompt, capsys) -> None:
    prompt.lines.extend(["x 99", "rm 5", "bogus", "add still alive", "quit"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Task 99 not found" in out
    assert "Task 05 not found" in out
    assert "'bogus' is not recognized" in out
    assert [t.description for t in state.task_store.tasks] == ["still alive"]


def test_loop_survives_handler_crash(state, prompt, capsys) -> None:
    reg = CommandRegistry()

    def boom(state, arg, emit):
        raise RuntimeError("boom")

    reg.register("boom", boom, "explode")
    prompt.lines.extend(["boom", "quit"])

    run_console_loop(state, registry=reg)

    assert "Internal error while handling a command." in capsys.readouterr().out


def test_quit_with_argument_is_not_quit(state, prompt, capsys) -> None:
    prompt.lines.extend(["quit now", "add after"])

    run_console_loop(state)

    assert "'quit' is not recognized" in capsys.readouterr().out
    assert len(state.task_store.tasks) == 1


def test_ctrl_c_at_prompt_exits(state, capsys) -> None:
    def interrupted(_prompt: str) -> str:
        raise KeyboardInterrupt

    state.prompt = interrupted

    run_console_loop(state)


def test_loop_passes_emitter_to_long_running_commands(state, prompt, capsys, monkeypatch) -> None:
    calls: list[dict] = []

    def fake_run_pomodoro(minutes, **kwargs):
        calls.append({"minutes": minutes, **kwargs})
        kwargs["write"]("tick from the timer")
        return True

    monkeypatch.setattr("todoz.cli.commands.run_pomodoro", fake_run_pomodoro)
    prompt.lines.extend(["pom", "quit"])

    run_console_loop(state)

    assert len(calls) == 1
    assert calls[0]["minutes"] == 1
    assert callable(calls[0]["write"])
    assert "tick from the timer" in capsys.readouterr().out

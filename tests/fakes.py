# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class ScriptedPrompt:
    """
    Deterministic replacement for input() used by console/command tests.

    - Returns the scripted lines in order
    - Raises EOFError once the script is exhausted (like stdin at EOF)
    - Captures every prompt shown, for assertions
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class FakeClock:
    """
    Monotonic clock that only moves when sleep() is called.

    Pass `clock` and `sleep` to run_pomodoro to run a whole session instantly.
    """

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps = 0

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps += 1
        self.now += seconds

# tests/test_pomodoro.py

from __future__ import annotations

from todoz.pomodoro import format_remaining, render_tick, run_pomodoro

from .fakes import FakeClock


def test_format_remaining() -> None:
    assert format_remaining(25 * 60) == "25:00"
    assert format_remaining(61) == "01:01"
    assert format_remaining(0) == "00:00"
    assert format_remaining(-3) == "00:00"


def test_render_tick_fills_bar() -> None:
    assert render_tick(60, 60).endswith("◇" * 17)
    assert render_tick(0, 60).endswith("◆" * 17)


def test_session_finishes_with_fake_clock() -> None:
    fake = FakeClock()
    lines: list[str] = []

    finished = run_pomodoro(
        1, clock=fake.clock, sleep=fake.sleep, write=lines.append, redraw=lines.append
    )

    assert finished is True
    ticks = [line for line in lines if "🍅 " in line and ":" in line]
    # one line per displayed second, plus the final 00:00
    assert ticks[0].strip().startswith("🍅 01:00")
    assert ticks[-1].strip().startswith("🍅 00:00")
    assert len(ticks) == 61
    assert "Time for a 5-minute break" in lines[-3]
    # 60 s polled in 0.2 s steps
    assert 299 <= fake.sleeps <= 301


def test_interrupt_stops_session() -> None:
    fake = FakeClock()
    lines: list[str] = []

    def interrupting_sleep(seconds: float) -> None:
        fake.sleep(seconds)
        if fake.sleeps == 10:
            raise KeyboardInterrupt

    finished = run_pomodoro(
        1, clock=fake.clock, sleep=interrupting_sleep, write=lines.append, redraw=lines.append
    )

    assert finished is False
    assert "Focus session stopped" in lines[-1]

# src/todoz/pomodoro.py

"""
Focus timer ("pom").

A plain countdown: poll a monotonic clock in short steps and write a new
MM:SS line whenever the displayed second changes. It never touches the task
store. Clock, sleep and writer are injectable for tests.
"""

from __future__ import annotations

import logging
import math
import sys
import time
from collections.abc import Callable

from .cli.render import SUBTLE_LINE, feedback

logger = logging.getLogger(__name__)

POLL_INTERVAL_S = 0.2
BAR_WIDTH = 17

Writer = Callable[[str], None]


def _default_writer(text: str) -> None:
    print(text, flush=True)


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
    else:
        print(line, flush=True)


def format_remaining(remaining_s: int) -> str:
    minutes, seconds = divmod(max(0, remaining_s), 60)
    return f"{minutes:02d}:{seconds:02d}"


def render_tick(remaining_s: int, total_s: int) -> str:
    elapsed = total_s - remaining_s
    percent = int(elapsed / total_s * 100) if total_s > 0 else 100
    filled = percent * BAR_WIDTH // 100
    bar = "◆" * filled + "◇" * (BAR_WIDTH - filled)
    return f"    🍅 {format_remaining(remaining_s)}  {bar}"


def run_pomodoro(
    minutes: int = 25,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    write: Writer = _default_writer,
    redraw: Writer | None = None,
) -> bool:
    """
    Run a focus session of `minutes` minutes.

    The first countdown line goes through `write`, later ones through `redraw`
    (in-place on a TTY by default; pass `redraw=write` to get one line per tick).

    Returns True when the full duration elapsed, False if interrupted (Ctrl-C).
    """
    if redraw is None:
        redraw = _rewrite_prev_line

    total_s = max(1, int(minutes)) * 60

    write("")
    write(feedback("Starting your focused work session", "🍅"))
    write("      Take a deep breath and focus on one task")
    write(SUBTLE_LINE)
    logger.info("Pomodoro started (%d min).", total_s // 60)

    start = clock()
    last_displayed: int | None = None

    try:
        while True:
            elapsed = clock() - start
            if elapsed >= total_s:
                break

            remaining = math.ceil(total_s - elapsed)
            if remaining != last_displayed:
                line = render_tick(remaining, total_s)
                if last_displayed is None:
                    write(line)
                else:
                    redraw(line)
                last_displayed = remaining

            sleep(POLL_INTERVAL_S)
    except KeyboardInterrupt:
        logger.info("Pomodoro interrupted.")
        write("")
        write(feedback("Focus session stopped", "✋"))
        return False

    redraw(render_tick(0, total_s))
    write("")
    write(feedback("Well done! Time for a 5-minute break", "✨"))
    write("      Stretch, breathe, or take a mindful walk")
    write("")
    logger.info("Pomodoro finished.")
    return True

# src/todoz/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Defaults match the classic layout: everything under ~/.todoz.
- Settings are resolved lazily so tests can build their own objects.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODOZ"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str, default: Path) -> Path | None:
    """Like _env_path, but an explicitly empty value disables the path."""
    raw = os.getenv(name)
    if raw is None:
        return default
    if raw.strip() == "":
        return None
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    return Path.home() / ".todoz"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    data_dir: Path
    todos_path: Path

    # ---- Focus timer ----
    pomodoro_minutes: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todoz")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        todos_path = _env_path(_k("TODOS_PATH"), data_dir / "todos.json")
        log_file = _env_optional_path(_k("LOG_FILE"), data_dir / "todoz.log")

        pomodoro_minutes = max(1, _env_int(_k("POMODORO_MINUTES"), 25))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            data_dir=data_dir,
            todos_path=todos_path,
            pomodoro_minutes=pomodoro_minutes,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings, reading the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _load_dotenv_if_available()
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings (next get_settings() re-reads the environment)."""
    global _SETTINGS
    _SETTINGS = None

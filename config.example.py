# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional; with none set, todoz keeps everything under ~/.todoz.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODOZ_APP_NAME": "App display name used in logs (default: todoz).",
    "TODOZ_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODOZ_LOG_FILE": "Debug log file (default: <data_dir>/todoz.log; empty disables file logging).",
    # Paths
    "TODOZ_DATA_DIR": "Local data directory (default: ~/.todoz).",
    "TODOZ_TODOS_PATH": "Task list JSON path (default: <data_dir>/todos.json).",
    # Focus timer
    "TODOZ_POMODORO_MINUTES": "Length of the 'pom' focus session in minutes (default: 25).",
}

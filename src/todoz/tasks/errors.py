# src/todoz/tasks/errors.py

"""
Error kinds raised by the task store and the command layer.

Callers branch on `TodozError.kind` (or the concrete subclass) instead of
parsing message text. Every error carries a one-line, user-presentable message.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    IO_FAILURE = "io_failure"
    PARSE_FAILURE = "parse_failure"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"


def format_task_id(task_id: int) -> str:
    """Ids below 10 are shown zero-padded ("07"), larger ones as-is."""
    return f"{task_id:02d}"


class TodozError(Exception):
    """Base class for all expected (recoverable) errors."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message


class IOFailure(TodozError):
    """Directory/file creation, read, or write failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(ErrorKind.IO_FAILURE, message)
        self.cause = cause


class ParseFailure(TodozError):
    """The persisted task file exists but is not a valid task list."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.PARSE_FAILURE, message)


class NotFound(TodozError):
    def __init__(self, task_id: int) -> None:
        super().__init__(ErrorKind.NOT_FOUND, f"Task {format_task_id(task_id)} not found")
        self.task_id = task_id


class InvalidArgument(TodozError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.INVALID_ARGUMENT, message)

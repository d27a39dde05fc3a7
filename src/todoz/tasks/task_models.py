# src/todoz/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ParseFailure

PROGRESS_SLOTS = 20


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        # Key order is part of the on-disk format.
        return {"id": self.id, "description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any, *, index: int = 0) -> Task:
        """
        Strict decoding of one persisted entry.

        Raises ParseFailure on anything that is not
        {"id": <uint>, "description": <str>, "completed": <bool>}.
        """
        if not isinstance(raw, dict):
            raise ParseFailure(f"Entry #{index} is not an object")

        tid = raw.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 0:
            raise ParseFailure(f"Entry #{index} has an invalid id: {tid!r}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise ParseFailure(f"Entry #{index} has an invalid description")

        completed = raw.get("completed")
        if not isinstance(completed, bool):
            raise ParseFailure(f"Entry #{index} has an invalid completed flag: {completed!r}")

        return cls(id=tid, description=description, completed=completed)


@dataclass(frozen=True, slots=True)
class Progress:
    completed: int
    total: int

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        # Integer math: float division floors 29/50 to 57.
        return self.completed * 100 // self.total

    @property
    def filled_slots(self) -> int:
        return self.percent * PROGRESS_SLOTS // 100

    @classmethod
    def of(cls, tasks: list[Task]) -> Progress:
        return cls(completed=sum(1 for t in tasks if t.completed), total=len(tasks))

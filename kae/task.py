"""Tasks, their status and the selectable task list."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from kae import utils


class TaskStatus(Enum):
    """Progress of a task; the value is its stored name."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    def next(self) -> TaskStatus:
        """The status that follows this one in the Todo → InProgress → Done cycle."""
        return _NEXT_STATUS[self]

    def symbol(self) -> str:
        """The glyph shown in front of a task with this status."""
        return _STATUS_SYMBOLS[self]


_NEXT_STATUS = {
    TaskStatus.TODO: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.DONE,
    TaskStatus.DONE: TaskStatus.TODO,
}

_STATUS_SYMBOLS = {
    TaskStatus.TODO: "☐",
    TaskStatus.IN_PROGRESS: "◌",
    TaskStatus.DONE: "✓",
}

_FIELDS = ("id", "name", "description", "status")


@dataclass
class Task:
    """A single todo item."""

    id: uuid.UUID
    name: str
    description: str
    status: TaskStatus = TaskStatus.TODO

    @classmethod
    def new(cls, name: str, description: str) -> Task:
        """A fresh task with a random id and status Todo."""
        return cls(uuid.uuid4(), name, description, TaskStatus.TODO)

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """Build a task from its stored mapping; raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object for a task, got {type(data).__name__}")
        missing = [name for name in _FIELDS if name not in data]
        if missing:
            raise ValueError(f"missing field `{missing[0]}`")
        for name in ("id", "name", "description", "status"):
            if not isinstance(data[name], str):
                raise ValueError(f"field `{name}` must be a string")
        try:
            status = TaskStatus(data["status"])
        except ValueError:
            raise ValueError(f"unknown status `{data['status']}`") from None
        return cls(uuid.UUID(data["id"]), data["name"], data["description"], status)

    def to_dict(self) -> dict[str, str]:
        """The stored mapping for this task."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }

    @classmethod
    def from_file(cls, path: str | Path) -> list[Task]:
        """Load every task stored in the JSON file at ``path``."""
        data = json.loads(utils.read_todos_from(path))
        if not isinstance(data, list):
            raise ValueError("expected a list of tasks")
        return [cls.from_dict(item) for item in data]

    def list_label(self) -> str:
        """The text shown for this task in the task list."""
        return f" {self.status.symbol()} {self.name}"


def dump_tasks(tasks: list[Task]) -> str:
    """Serialise tasks as pretty-printed JSON."""
    return json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)


class ListMode(Enum):
    VIEW = "view"
    MODIFY = "modify"


@dataclass
class TaskList:
    """Tasks together with the currently selected row."""

    tasks: list[Task] = field(default_factory=list)
    selected: int | None = None
    mode: ListMode = ListMode.VIEW

    def select(self, index: int | None) -> None:
        """Select ``index``, clamped to the list; ``None`` clears the selection."""
        if index is None or not self.tasks:
            self.selected = None
        else:
            self.selected = min(max(index, 0), len(self.tasks) - 1)

    def select_next(self) -> None:
        self.select(0 if self.selected is None else self.selected + 1)

    def select_previous(self) -> None:
        if self.selected is None:
            self.select_last()
        else:
            self.select(self.selected - 1)

    def select_first(self) -> None:
        self.select(0)

    def select_last(self) -> None:
        self.select(len(self.tasks) - 1)

    def selected_task(self) -> Task | None:
        """The selected task, or ``None`` when nothing is selected."""
        if self.selected is None:
            return None
        return self.tasks[self.selected]
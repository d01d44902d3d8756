"""Record types and builders shared by the table tests."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pi.table.surface import Screen


class Status(enum.Enum):
    OPEN = "open"
    DONE = "done"


@dataclass
class Task:
    id: str
    title: str
    status: Status = Status.OPEN
    tags: list[str] = field(default_factory=list)
    owner: str | None = None


def make_tasks(count: int) -> list[Task]:
    return [Task(id=f"t{i}", title=f"Task {i}") for i in range(count)]


def cell_text(screen: Screen, x: int, y: int, width: int) -> str:
    """Plain text of *width* cells of row *y* starting at column *x*."""
    chars = []
    for col in range(x, x + width):
        cell = screen.read_cell(col, y)
        if cell is not None and cell.width > 0:
            chars.append(cell.char)
    return "".join(chars)

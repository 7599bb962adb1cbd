# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Task:
    """
    A single to-do record.

    Notes:
    - id is assigned by the store; whatever the caller puts here is ignored on add.
    - created_date is set once at construction and never rewritten by the store.
    """

    id: int = 0
    name: str = ""
    details: str = ""
    is_completed: bool = False
    created_date: datetime = field(default_factory=_utc_now)
    due_date: datetime | None = None


def example_tasks() -> list[Task]:
    """Sample records so a fresh store is not empty."""
    return [
        Task(id=1, name="Mow Lawns", details="Mow the lawn at the front"),
        Task(id=2, name="Empty Rubbish", details="Empty rubbish into wheely bin"),
        Task(id=3, name="Wash Dishes", details="Wash the pots and pans"),
    ]

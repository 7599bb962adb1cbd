# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

View models depend on Protocols instead of the concrete store.
This keeps the storage swappable (e.g. a persistent repository) and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Task collection contract.

    Mutators return True when a task with the given id existed.
    Callers that ignore the result get plain "no-op on unknown id" behavior.
    """

    def list_all(self) -> list[Task]: ...
    def get(self, task_id: int) -> Task | None: ...
    def add(self, task: Task) -> Task: ...
    def remove(self, task_id: int) -> bool: ...
    def update(self, task: Task) -> bool: ...
    def toggle_complete(self, task_id: int) -> bool: ...


class DialogHost(Protocol):
    """
    Whatever shows a dialog (window, console prompt, test fake).

    The dialog view model only reports the outcome; the host decides how to close.
    """

    def close(self, accepted: bool) -> None: ...

# src/taskpad/presentation/main_view_model.py

"""
Main view model: bridge between the task repository and a front end.

- mirrors repo.list_all() into an ObservableList the front end renders
- forwards user intents (add/delete/toggle/edit/select) into repo calls
- re-synchronizes its mirror explicitly after every mutation

The mirror holds its own copies. Nothing is shared by reference with the repo,
so a change only shows up here after the view model re-reads it.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.ports import TaskRepo
from ..tasks.task_models import Task
from .observable import ObservableList, ObservableObject
from .relay_command import RelayCommand

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_NAME = "New Task"
DEFAULT_PLACEHOLDER_DETAILS = "Add Details Here"


class MainViewModel(ObservableObject):
    def __init__(
        self,
        repo: TaskRepo,
        *,
        placeholder_name: str = DEFAULT_PLACEHOLDER_NAME,
        placeholder_details: str = DEFAULT_PLACEHOLDER_DETAILS,
    ) -> None:
        super().__init__()
        self._repo = repo
        self._placeholder_name = placeholder_name
        self._placeholder_details = placeholder_details
        self._selected_task: Task | None = None

        self.tasks: ObservableList[Task] = ObservableList(repo.list_all())

        self.add_task_command = RelayCommand(lambda _param: self.add_task())
        self.delete_task_command = RelayCommand(
            lambda _param: self.delete_selected(),
            lambda _param: self._selected_task is not None,
        )
        self.toggle_complete_command = RelayCommand(
            lambda _param: self.toggle_selected(),
            lambda _param: self._selected_task is not None,
        )
        self.edit_task_command = RelayCommand(
            self._edit_from_param,
            lambda _param: self._selected_task is not None,
        )

    # ---- selection ----

    @property
    def selected_task(self) -> Task | None:
        return self._selected_task

    @selected_task.setter
    def selected_task(self, value: Task | None) -> None:
        self._selected_task = value
        self._notify("selected_task")

        # Selection gates delete/toggle/edit.
        self.delete_task_command.raise_can_execute_changed()
        self.toggle_complete_command.raise_can_execute_changed()
        self.edit_task_command.raise_can_execute_changed()

    @property
    def has_selection(self) -> bool:
        return self._selected_task is not None

    def select(self, task_id: int | None) -> bool:
        """Select the mirrored task with this id (None clears). Returns has_selection."""
        if task_id is None:
            self.selected_task = None
            return False
        idx = self._index_of(task_id)
        if idx < 0:
            logger.debug("select: id=%s not in mirror", task_id)
            return self.has_selection
        self.selected_task = self.tasks[idx]
        return True

    # ---- intents ----

    def add_task(self, name: str | None = None, details: str | None = None) -> Task:
        draft = Task(
            name=self._placeholder_name if name is None else name,
            details=self._placeholder_details if details is None else details,
        )
        stored = self._repo.add(draft)
        self.tasks.append(stored)
        logger.info("Added task id=%s name=%r", stored.id, stored.name)
        return stored

    def delete_selected(self) -> None:
        selected = self._selected_task
        if selected is None:
            return
        self._repo.remove(selected.id)
        idx = self._index_of(selected.id)
        if idx >= 0:
            self.tasks.remove_at(idx)
        logger.info("Deleted task id=%s", selected.id)
        self.selected_task = None

    def toggle_selected(self) -> None:
        selected = self._selected_task
        if selected is None:
            return
        self._repo.toggle_complete(selected.id)
        fresh = self._sync_one(selected.id)
        if fresh is not None:
            logger.info("Toggled task id=%s completed=%s", fresh.id, fresh.is_completed)

    def edit_selected(self, name: str, details: str | None = None) -> None:
        """Rename (and optionally re-describe) the selected task; completion is kept."""
        selected = self._selected_task
        if selected is None:
            return
        if not name or not name.strip():
            raise ValueError("name is required")
        edited = Task(
            id=selected.id,
            name=name,
            details=selected.details if details is None else details,
            is_completed=selected.is_completed,
        )
        self._repo.update(edited)
        self._sync_one(selected.id)
        logger.info("Edited task id=%s", selected.id)

    def refresh(self) -> None:
        """Rebuild the mirror from the repo; keep the selection if it still exists."""
        self.tasks.reset(self._repo.list_all())
        selected = self._selected_task
        if selected is None:
            return
        idx = self._index_of(selected.id)
        self.selected_task = self.tasks[idx] if idx >= 0 else None

    # ---- helpers ----

    def _index_of(self, task_id: int) -> int:
        return self.tasks.index_where(lambda t: t.id == task_id)

    def _sync_one(self, task_id: int) -> Task | None:
        """Re-read one record from the repo into the mirror (single UPDATE event)."""
        fresh = self._repo.get(task_id)
        idx = self._index_of(task_id)
        if fresh is None:
            # Gone from the repo behind our back: drop it here too.
            if idx >= 0:
                self.tasks.remove_at(idx)
            if self._selected_task is not None and self._selected_task.id == task_id:
                self.selected_task = None
            return None
        if idx >= 0:
            self.tasks.replace_at(idx, fresh)
        if self._selected_task is not None and self._selected_task.id == task_id:
            self.selected_task = fresh
        return fresh

    def _edit_from_param(self, param: Any) -> None:
        # param: (name, details) tuple or a bare name
        if isinstance(param, tuple):
            name, details = param
            self.edit_selected(name, details)
        else:
            self.edit_selected(str(param or ""))

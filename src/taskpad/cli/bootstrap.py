# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds one TaskStore and hands it to the MainViewModel (no global store).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..presentation.main_view_model import MainViewModel
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(settings) -> TaskStore:
    id_seed = getattr(settings, "id_seed", None)
    if getattr(settings, "seed_examples", True):
        return TaskStore.with_examples(next_id=id_seed)
    return TaskStore(next_id=id_seed)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = create_task_store(settings)
    view_model = MainViewModel(
        store,
        placeholder_name=getattr(settings, "placeholder_name", "New Task"),
        placeholder_details=getattr(settings, "placeholder_details", "Add Details Here"),
    )
    logger.debug("AppState wired tasks=%s", store.count())
    return AppState(settings=settings, task_store=store, view_model=view_model)

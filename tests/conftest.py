# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        log_file=None,
        console_enabled=False,
        placeholder_name="New Task",
        placeholder_details="Add Details Here",
        seed_examples=True,
        id_seed=None,
    )


@pytest.fixture()
def store() -> TaskStore:
    """Store seeded with the three sample tasks (ids 1..3, next id 4)."""
    return TaskStore.with_examples()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)

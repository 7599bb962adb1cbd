# src/taskpad/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..presentation.main_view_model import MainViewModel
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskStore
    view_model: MainViewModel

    # The store has no internal locking; front ends serialize through this.
    lock: threading.RLock = field(default_factory=threading.RLock)

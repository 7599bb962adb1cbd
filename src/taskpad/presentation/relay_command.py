# src/taskpad/presentation/relay_command.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

ExecuteFn = Callable[[Any], None]
CanExecuteFn = Callable[[Any], bool]


class RelayCommand:
    """
    An action plus an enablement predicate, bindable to a button or a slash command.

    Front ends subscribe to learn when they should re-check can_execute().
    """

    def __init__(self, execute: ExecuteFn, can_execute: CanExecuteFn | None = None) -> None:
        self._execute = execute
        self._can_execute = can_execute
        self._subscribers: list[Callable[[], None]] = []

    def can_execute(self, param: Any = None) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._can_execute(param))

    def execute(self, param: Any = None) -> None:
        if not self.can_execute(param):
            logger.debug("Command skipped (can_execute is False).")
            return
        self._execute(param)

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def raise_can_execute_changed(self) -> None:
        for cb in list(self._subscribers):
            cb()

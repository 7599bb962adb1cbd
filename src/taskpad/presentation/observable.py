# src/taskpad/presentation/observable.py

"""
Change notification primitives for headless view models.

- ObservableObject: property-changed callbacks (called with the property name)
- ObservableList: a list that reports add/remove/update/reset to subscribers

A front end (console, GUI toolkit, test) subscribes and re-renders what changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")

PropertyCallback = Callable[[str], None]

logger = logging.getLogger(__name__)


class ObservableObject:
    """Base class for objects that announce property changes."""

    def __init__(self) -> None:
        self._property_subscribers: list[PropertyCallback] = []

    def subscribe(self, callback: PropertyCallback) -> None:
        self._property_subscribers.append(callback)

    def unsubscribe(self, callback: PropertyCallback) -> None:
        if callback in self._property_subscribers:
            self._property_subscribers.remove(callback)

    def _notify(self, name: str) -> None:
        for cb in list(self._property_subscribers):
            cb(name)


class ListChangeKind(StrEnum):
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"
    RESET = "reset"


@dataclass(slots=True, frozen=True)
class ListChange:
    """
    One change to an ObservableList.

    index/item:
    - add/update: position and the new item
    - remove: former position and the removed item
    - reset: index -1, item None (re-read the whole list)
    """

    kind: ListChangeKind
    index: int
    item: Any = None


ListCallback = Callable[[ListChange], None]


class ObservableList(Sequence[T], Generic[T]):
    """
    Read-only sequence with explicit mutators that emit ListChange events.

    replace_at emits a single UPDATE event, so observers can refresh one row
    instead of seeing the item removed and re-added.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items or ())
        self._subscribers: list[ListCallback] = []

    # ---- Sequence ----

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    # ---- subscriptions ----

    def subscribe(self, callback: ListCallback) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ListCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _emit(self, change: ListChange) -> None:
        for cb in list(self._subscribers):
            cb(change)

    # ---- mutators ----

    def append(self, item: T) -> None:
        self._items.append(item)
        self._emit(ListChange(ListChangeKind.ADD, len(self._items) - 1, item))

    def remove_at(self, index: int) -> T:
        item = self._items.pop(index)
        self._emit(ListChange(ListChangeKind.REMOVE, index, item))
        return item

    def replace_at(self, index: int, item: T) -> None:
        self._items[index] = item
        self._emit(ListChange(ListChangeKind.UPDATE, index, item))

    def reset(self, items: Iterable[T]) -> None:
        self._items = list(items)
        logger.debug("ObservableList reset size=%s", len(self._items))
        self._emit(ListChange(ListChangeKind.RESET, -1, None))

    def index_where(self, predicate: Callable[[T], bool]) -> int:
        """Position of the first matching item, or -1."""
        for i, item in enumerate(self._items):
            if predicate(item):
                return i
        return -1

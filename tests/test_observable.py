# tests/test_observable.py

from __future__ import annotations

from taskpad.presentation.observable import ListChangeKind, ObservableList
from taskpad.presentation.relay_command import RelayCommand

from .fakes import ChangeRecorder


def test_observable_list_emits_one_event_per_mutation() -> None:
    items: ObservableList[str] = ObservableList(["a", "b"])
    rec = ChangeRecorder()
    items.subscribe(rec.on_list)

    items.append("c")
    items.replace_at(0, "A")
    removed = items.remove_at(1)
    items.reset(["z"])

    assert removed == "b"
    assert [c.kind for c in rec.changes] == [
        ListChangeKind.ADD,
        ListChangeKind.UPDATE,
        ListChangeKind.REMOVE,
        ListChangeKind.RESET,
    ]
    assert (rec.changes[0].index, rec.changes[0].item) == (2, "c")
    assert (rec.changes[1].index, rec.changes[1].item) == (0, "A")
    assert (rec.changes[2].index, rec.changes[2].item) == (1, "b")
    assert list(items) == ["z"]


def test_observable_list_sequence_behavior_and_unsubscribe() -> None:
    items: ObservableList[int] = ObservableList([1, 2, 3])
    rec = ChangeRecorder()
    items.subscribe(rec.on_list)
    items.unsubscribe(rec.on_list)
    items.append(4)

    assert rec.changes == []
    assert len(items) == 4
    assert items[-1] == 4
    assert 3 in items
    assert items.index_where(lambda x: x > 2) == 2
    assert items.index_where(lambda x: x > 10) == -1


def test_relay_command_respects_can_execute() -> None:
    ran: list[object] = []
    enabled = {"on": False}
    cmd = RelayCommand(ran.append, lambda _param: enabled["on"])

    cmd.execute("x")
    assert ran == []
    assert cmd.can_execute() is False

    enabled["on"] = True
    cmd.execute("y")
    assert ran == ["y"]


def test_relay_command_without_predicate_is_always_enabled() -> None:
    ran: list[object] = []
    cmd = RelayCommand(ran.append)
    assert cmd.can_execute() is True
    cmd.execute()
    assert ran == [None]


def test_relay_command_can_execute_changed_notifies_subscribers() -> None:
    cmd = RelayCommand(lambda _param: None)
    rec = ChangeRecorder()
    cmd.subscribe(rec.on_can_execute)

    cmd.raise_can_execute_changed()
    cmd.unsubscribe(rec.on_can_execute)
    cmd.raise_can_execute_changed()

    assert rec.can_execute_calls == 1

# tests/test_main_view_model.py

from __future__ import annotations

import pytest

from taskpad.presentation.main_view_model import MainViewModel
from taskpad.presentation.observable import ListChangeKind
from taskpad.tasks.task_models import Task, example_tasks
from taskpad.tasks.task_store import TaskStore

from .fakes import ChangeRecorder, FakeTaskRepo


@pytest.fixture()
def vm(store: TaskStore) -> MainViewModel:
    return MainViewModel(store)


def test_mirror_starts_from_store(vm: MainViewModel, store: TaskStore) -> None:
    assert [t.id for t in vm.tasks] == [t.id for t in store.list_all()]
    assert vm.selected_task is None


def test_mirror_does_not_alias_store_records(vm: MainViewModel, store: TaskStore) -> None:
    vm.tasks[0].name = "mirror only"
    assert store.get(1).name == "Mow Lawns"


def test_add_uses_placeholders_and_appends(vm: MainViewModel, store: TaskStore) -> None:
    rec = ChangeRecorder()
    vm.tasks.subscribe(rec.on_list)

    vm.add_task_command.execute()

    assert len(vm.tasks) == 4
    added = vm.tasks[-1]
    assert added.id == 4
    assert added.name == "New Task"
    assert added.details == "Add Details Here"
    assert store.get(4) is not None
    assert [c.kind for c in rec.changes] == [ListChangeKind.ADD]


def test_custom_placeholders() -> None:
    vm = MainViewModel(TaskStore(), placeholder_name="Todo", placeholder_details="")
    t = vm.add_task()
    assert (t.name, t.details) == ("Todo", "")


def test_delete_and_toggle_gated_on_selection(vm: MainViewModel) -> None:
    rec = ChangeRecorder()
    vm.delete_task_command.subscribe(rec.on_can_execute)
    vm.subscribe(rec.on_property)

    assert vm.delete_task_command.can_execute() is False
    assert vm.toggle_complete_command.can_execute() is False

    assert vm.select(2) is True
    assert vm.selected_task.id == 2
    assert vm.delete_task_command.can_execute() is True
    assert vm.toggle_complete_command.can_execute() is True
    assert rec.can_execute_calls == 1
    assert rec.properties == ["selected_task"]

    assert vm.select(None) is False
    assert vm.delete_task_command.can_execute() is False


def test_select_unknown_id_keeps_current_selection(vm: MainViewModel) -> None:
    vm.select(1)
    assert vm.select(77) is True
    assert vm.selected_task.id == 1


def test_delete_selected_removes_from_store_and_mirror(vm: MainViewModel, store: TaskStore) -> None:
    vm.select(2)
    rec = ChangeRecorder()
    vm.tasks.subscribe(rec.on_list)

    vm.delete_task_command.execute()

    assert [t.id for t in store.list_all()] == [1, 3]
    assert [t.id for t in vm.tasks] == [1, 3]
    assert vm.selected_task is None
    assert rec.changes[0].kind == ListChangeKind.REMOVE
    assert rec.changes[0].item.id == 2


def test_delete_without_selection_does_nothing(vm: MainViewModel, store: TaskStore) -> None:
    vm.delete_task_command.execute()
    vm.delete_selected()
    assert store.count() == 3


def test_toggle_emits_single_update_event(vm: MainViewModel, store: TaskStore) -> None:
    vm.select(1)
    rec = ChangeRecorder()
    vm.tasks.subscribe(rec.on_list)

    vm.toggle_complete_command.execute()

    assert store.get(1).is_completed is True
    assert vm.tasks[0].is_completed is True
    assert vm.selected_task.is_completed is True
    assert [c.kind for c in rec.changes] == [ListChangeKind.UPDATE]
    assert rec.changes[0].index == 0
    # position in the mirror is preserved
    assert [t.id for t in vm.tasks] == [1, 2, 3]


def test_toggle_goes_through_repo() -> None:
    repo = FakeTaskRepo(example_tasks())
    vm = MainViewModel(repo)
    vm.select(3)
    vm.toggle_selected()
    vm.toggle_selected()

    assert repo.calls == [("toggle_complete", 3), ("toggle_complete", 3)]
    assert vm.selected_task.is_completed is False


def test_toggle_drops_task_removed_behind_the_mirror() -> None:
    repo = FakeTaskRepo(example_tasks())
    vm = MainViewModel(repo)
    vm.select(2)
    repo.tasks.pop(2)

    vm.toggle_selected()

    assert [t.id for t in vm.tasks] == [1, 3]
    assert vm.selected_task is None


def test_edit_selected_updates_name_and_details(vm: MainViewModel, store: TaskStore) -> None:
    vm.select(1)
    vm.toggle_selected()
    created = store.get(1).created_date

    vm.edit_task_command.execute(("Mow Back Lawn", "Behind the shed"))

    stored = store.get(1)
    assert stored.name == "Mow Back Lawn"
    assert stored.details == "Behind the shed"
    assert stored.is_completed is True
    assert stored.created_date == created
    assert vm.tasks[0].name == "Mow Back Lawn"


def test_edit_rejects_blank_name(vm: MainViewModel) -> None:
    vm.select(1)
    with pytest.raises(ValueError):
        vm.edit_selected("   ")


def test_refresh_rebuilds_mirror_and_keeps_selection(vm: MainViewModel, store: TaskStore) -> None:
    vm.select(3)
    store.add(Task(name="added directly"))
    store.remove(1)
    rec = ChangeRecorder()
    vm.tasks.subscribe(rec.on_list)

    vm.refresh()

    assert [t.id for t in vm.tasks] == [2, 3, 4]
    assert vm.selected_task.id == 3
    assert rec.changes[0].kind == ListChangeKind.RESET

    store.remove(3)
    vm.refresh()
    assert vm.selected_task is None

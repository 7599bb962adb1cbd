# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..presentation.add_task_view_model import AddTaskViewModel
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandPrompter = Callable[[str], str]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler4 = Callable[
    [AppState, list[str], CommandEmitter | None, CommandPrompter | None], str
]
CommandHandler = CommandHandler2 | CommandHandler4

logger = logging.getLogger(__name__)

NO_SELECTION = "No task selected. Use /select <id> first."


class CommandRegistry:
    """Simple slash-command registry used by the console front end (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
        ask: CommandPrompter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, emit, ask)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task, *, selected: bool = False) -> str:
    mark = "x" if task.is_completed else " "
    cursor = ">" if selected else " "
    created = task.created_date.astimezone().strftime("%Y-%m-%d %H:%M")
    line = f"{cursor} [{mark}] {task.id:>3}  {task.name}"
    if task.details:
        line += f" - {task.details}"
    line += f"  (created {created}"
    if task.due_date is not None:
        line += f", due {task.due_date.astimezone().strftime('%Y-%m-%d %H:%M')}"
    return line + ")"


def _split_name_details(args: list[str]) -> tuple[str, str | None]:
    """'/cmd Buy milk | two litres' -> ('Buy milk', 'two litres')."""
    text = " ".join(args)
    if "|" not in text:
        return text.strip(), None
    name, details = text.split("|", 1)
    return name.strip(), details.strip()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    vm = state.view_model
    if not len(vm.tasks):
        return "No tasks."
    sel_id = vm.selected_task.id if vm.selected_task is not None else None
    lines = [f"Tasks ({len(vm.tasks)}):"]
    for t in vm.tasks:
        lines.append(format_task(t, selected=t.id == sel_id))
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add                     -> placeholder task
    /add Buy milk            -> named task
    /add Buy milk | 2 litres -> named task with details
    """
    vm = state.view_model
    if not args:
        vm.add_task_command.execute()
        task = vm.tasks[-1]
    else:
        name, details = _split_name_details(args)
        if not name:
            return "Task name cannot be empty. Usage: /add <name> [| details]."
        task = vm.add_task(name, details if details is not None else "")
    return f"Added task {task.id}: {task.name}"


class _PromptDialogHost:
    """DialogHost that just remembers the outcome of a console-driven dialog."""

    def __init__(self) -> None:
        self.closed = False
        self.accepted = False

    def close(self, accepted: bool) -> None:
        self.closed = True
        self.accepted = accepted


def cmd_new(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
    ask: CommandPrompter | None = None,
) -> str:
    """
    /new -> interactive creation dialog (name, details).

    Pressing Enter on an empty name cancels. A whitespace-only name is refused by
    the dialog, which stays open and asks again.
    """
    if ask is None:
        return "/new needs an interactive console. Use /add <name> [| details] instead."

    host = _PromptDialogHost()
    dialog = AddTaskViewModel(host)
    while not host.closed:
        name = ask("Name (empty to cancel): ")
        if name == "":
            dialog.cancel_command.execute()
            break
        dialog.name = name
        dialog.details = ask("Details: ")
        dialog.save_command.execute()
        if not host.closed and emit is not None:
            emit("Name cannot be blank; try again.")

    if not host.accepted:
        return "Cancelled."
    task = state.view_model.add_task(dialog.name.strip(), dialog.details.strip())
    return f"Added task {task.id}: {task.name}"


def cmd_select(state: AppState, args: list[str]) -> str:
    """
    /select <id>  -> select a task
    /select none  -> clear selection
    """
    vm = state.view_model
    if not args:
        if vm.selected_task is None:
            return "Nothing selected. Usage: /select <id> | /select none."
        return "Selected:\n" + format_task(vm.selected_task, selected=True)

    arg = args[0].lower()
    if arg in ("none", "clear", "-"):
        vm.select(None)
        return "Selection cleared."

    try:
        task_id = int(arg)
    except ValueError:
        return "Usage: /select <id> | /select none."

    vm.select(task_id)
    if vm.selected_task is None or vm.selected_task.id != task_id:
        return f"No task with id {task_id}."
    return "Selected:\n" + format_task(vm.selected_task, selected=True)


def cmd_delete(state: AppState, args: list[str]) -> str:
    vm = state.view_model
    if not vm.delete_task_command.can_execute():
        return NO_SELECTION
    task_id = vm.selected_task.id if vm.selected_task is not None else None
    vm.delete_task_command.execute()
    return f"Deleted task {task_id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    vm = state.view_model
    if not vm.toggle_complete_command.can_execute():
        return NO_SELECTION
    vm.toggle_complete_command.execute()
    t = vm.selected_task
    if t is None:
        return "Task no longer exists."
    return f"Task {t.id} marked as {'complete' if t.is_completed else 'not complete'}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <name> [| details] -> rename the selected task
    """
    vm = state.view_model
    if not vm.edit_task_command.can_execute():
        return NO_SELECTION
    if not args:
        return "Usage: /edit <name> [| details]."
    name, details = _split_name_details(args)
    try:
        vm.edit_task_command.execute((name, details))
    except ValueError as e:
        return f"Cannot edit: {e}."
    t = vm.selected_task
    return "Updated:\n" + format_task(t, selected=True) if t is not None else "Task no longer exists."


def cmd_status(state: AppState, args: list[str]) -> str:
    vm = state.view_model
    done = sum(1 for t in vm.tasks if t.is_completed)
    sel = vm.selected_task.id if vm.selected_task is not None else "none"
    return (
        "Status:\n"
        f"  Tasks: {len(vm.tasks)} ({done} complete)\n"
        f"  Selected: {sel}\n"
        f"  Next id: {state.task_store.next_id}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks (> marks the selection).", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add [name | details].")
registry.register("new", cmd_new, help_text="Add a task through the creation dialog.")
registry.register("select", cmd_select, help_text="Select a task: /select <id> | none.", aliases=["sel"])
registry.register("delete", cmd_delete, help_text="Delete the selected task.", aliases=["del", "rm"])
registry.register("toggle", cmd_toggle, help_text="Toggle completion of the selected task.", aliases=["done"])
registry.register("edit", cmd_edit, help_text="Edit the selected task: /edit <name> [| details].")
registry.register("status", cmd_status, help_text="Show task counts and selection.")

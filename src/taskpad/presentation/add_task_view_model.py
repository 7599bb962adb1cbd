# src/taskpad/presentation/add_task_view_model.py

from __future__ import annotations

from ..core.ports import DialogHost
from .observable import ObservableObject
from .relay_command import RelayCommand


class AddTaskViewModel(ObservableObject):
    """
    Creation dialog: collects name/details and reports accept/cancel to its host.

    Saving with a blank (or whitespace-only) name does nothing; the dialog stays open.
    """

    def __init__(self, host: DialogHost) -> None:
        super().__init__()
        self._host = host
        self._name = ""
        self._details = ""

        self.save_command = RelayCommand(lambda _param: self._save())
        self.cancel_command = RelayCommand(lambda _param: self._host.close(False))

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        self._notify("name")
        self._notify("can_save")

    @property
    def details(self) -> str:
        return self._details

    @details.setter
    def details(self, value: str) -> None:
        self._details = value
        self._notify("details")

    @property
    def can_save(self) -> bool:
        return bool(self._name and self._name.strip())

    def _save(self) -> None:
        if not self.can_save:
            return
        self._host.close(True)

"""Base class for executable commands."""

from abc import ABC, abstractmethod
from typing import ClassVar

from reachbook.application.dto import CommandResult, Index
from reachbook.application.errors import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX, CommandError
from reachbook.application.ports import Model
from reachbook.domain import Person


class Command(ABC):
    """One mutation or query against the model, producing a CommandResult."""

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """Run the command. Raises CommandError if it cannot be carried out."""


def person_at(model: Model, index: Index) -> Person:
    """Return the person at index in the filtered list, checked against its current size."""
    shown = model.get_filtered_person_list()
    if index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return shown[index.zero_based]

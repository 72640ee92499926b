"""Filter the displayed list, and reset it."""

from dataclasses import dataclass

from reachbook.application.commands.base import Command
from reachbook.application.dto import CommandResult
from reachbook.application.ports import Model, PersonPredicate
from reachbook.domain import show_all_persons

MESSAGE_PERSONS_LISTED_OVERVIEW = "%d persons listed!"


@dataclass(frozen=True)
class FindCommand(Command):
    predicate: PersonPredicate

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        COMMAND_WORD
        + ": Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive), or who match every given field filter, and displays them "
        "as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "  or: [n/NAME] [t/TAG]... [s/STATUS] [p/PHONE] [e/EMAIL] [a/ADDRESS]\n"
        "Example: " + COMMAND_WORD + " alice bob charlie\n"
        "Example: " + COMMAND_WORD + " n/alice t/friends s/contacted"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW % len(model.get_filtered_person_list()))


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = COMMAND_WORD + ": Lists all persons."
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS)

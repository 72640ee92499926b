"""Commands that do not touch the address book."""

from dataclasses import dataclass

from reachbook.application.commands.base import Command
from reachbook.application.dto import CommandResult
from reachbook.application.ports import Model


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = COMMAND_WORD + ": Shows program usage instructions.\nExample: " + COMMAND_WORD
    SHOWING_HELP_MESSAGE = "Showing help."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = COMMAND_WORD + ": Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Reachbook as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)

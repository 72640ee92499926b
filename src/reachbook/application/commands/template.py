"""Show or replace the message template for a status."""

from dataclasses import dataclass

from reachbook.application.commands.base import Command
from reachbook.application.dto import CommandResult
from reachbook.application.ports import Model
from reachbook.domain import Status


@dataclass(frozen=True)
class TemplateCommand(Command):
    """
    With no message, shows the stored template for status. With a message, saves it
    (a blank message restores the default) and shows what was stored.
    """

    status: Status
    message: str | None = None

    COMMAND_WORD = "template"
    MESSAGE_USAGE = (
        COMMAND_WORD
        + ": Shows the message template for a status, or replaces it when a message is given.\n"
        "Parameters: s/STATUS [m/MESSAGE]\n"
        "Example: " + COMMAND_WORD + " s/contacted\n"
        "Example: " + COMMAND_WORD + " s/contacted m/Hi! Following up on our call."
    )
    MESSAGE_SHOW = "Template for status %s:\n%s"
    MESSAGE_SAVED = "Template for status %s saved:\n%s"

    def execute(self, model: Model) -> CommandResult:
        storage = model.template_storage
        if self.message is None:
            return CommandResult(self.MESSAGE_SHOW % (self.status, storage.read_template(self.status)))
        storage.save_template(self.status, self.message)
        return CommandResult(self.MESSAGE_SAVED % (self.status, storage.read_template(self.status)))

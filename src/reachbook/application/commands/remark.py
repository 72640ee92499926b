"""Set or clear the remark of a displayed person."""

import logging
from dataclasses import dataclass

from reachbook.application.commands.base import Command, person_at
from reachbook.application.dto import CommandResult, Index
from reachbook.application.ports import Model
from reachbook.domain import Remark, format_person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemarkCommand(Command):
    """
    Replaces the remark of the person at index in the currently filtered list.
    The existing remark is overwritten, and an empty remark clears it.
    """

    index: Index
    remark: Remark

    COMMAND_WORD = "remark"
    MESSAGE_USAGE = (
        COMMAND_WORD
        + ": Edits the remark of the person identified by the index number used in the "
        "last person listing. Existing remark will be overwritten by the input.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: " + COMMAND_WORD + " 1 r/Likes to swim."
    )
    MESSAGE_SUCCESS = "Remark updated: %s"

    def execute(self, model: Model) -> CommandResult:
        target = person_at(model, self.index)
        remarked = target.with_remark(Remark(self.remark.value))
        model.set_person(target, remarked)
        logger.debug("Remark set on person %d", self.index.one_based)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(remarked))

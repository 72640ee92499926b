"""Executable commands."""

from reachbook.application.commands.base import Command
from reachbook.application.commands.find import FindCommand, ListCommand
from reachbook.application.commands.general import ExitCommand, HelpCommand
from reachbook.application.commands.person import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
)
from reachbook.application.commands.remark import RemarkCommand
from reachbook.application.commands.template import TemplateCommand

ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    ListCommand,
    ClearCommand,
    FindCommand,
    RemarkCommand,
    TemplateCommand,
    HelpCommand,
    ExitCommand,
)

__all__ = [
    "ALL_COMMANDS",
    "AddCommand",
    "ClearCommand",
    "Command",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "RemarkCommand",
    "TemplateCommand",
]

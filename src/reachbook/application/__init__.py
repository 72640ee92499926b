"""Application layer: commands, parsers, ports, and DTOs. Depends only on domain."""

from reachbook.application.commands import (
    ALL_COMMANDS,
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RemarkCommand,
    TemplateCommand,
)
from reachbook.application.dto import CommandResult, Index
from reachbook.application.errors import CommandError, ParseError
from reachbook.application.parser import AddressBookParser
from reachbook.application.ports import Model, TemplateStorage

__all__ = [
    "ALL_COMMANDS",
    "AddCommand",
    "AddressBookParser",
    "ClearCommand",
    "Command",
    "CommandError",
    "CommandResult",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "Index",
    "ListCommand",
    "Model",
    "ParseError",
    "RemarkCommand",
    "TemplateCommand",
    "TemplateStorage",
]

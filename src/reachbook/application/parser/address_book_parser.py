"""Dispatch a raw input line to the parser for its leading command word."""

import logging
import re

from reachbook.application.commands import (
    ClearCommand,
    Command,
    ExitCommand,
    HelpCommand,
    ListCommand,
)
from reachbook.application.errors import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    ParseError,
)
from reachbook.application.parser.find_parser import FindCommandParser
from reachbook.application.parser.person_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
)
from reachbook.application.parser.remark_parser import RemarkCommandParser
from reachbook.application.parser.template_parser import TemplateCommandParser

logger = logging.getLogger(__name__)

_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<args>.*)", re.DOTALL)

_PARSERS = {
    "add": AddCommandParser,
    "edit": EditCommandParser,
    "delete": DeleteCommandParser,
    "find": FindCommandParser,
    "remark": RemarkCommandParser,
    "template": TemplateCommandParser,
}

_NO_ARG_COMMANDS: dict[str, type[Command]] = {
    ListCommand.COMMAND_WORD: ListCommand,
    ClearCommand.COMMAND_WORD: ClearCommand,
    HelpCommand.COMMAND_WORD: HelpCommand,
    ExitCommand.COMMAND_WORD: ExitCommand,
}


class AddressBookParser:
    def parse_command(self, user_input: str) -> Command:
        """Parse one line of user input into a command. Raises ParseError."""
        match = _COMMAND_FORMAT.fullmatch((user_input or "").strip())
        if match is None:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % HelpCommand.MESSAGE_USAGE)

        word = match.group("word")
        args = match.group("args")
        logger.debug("Command word: %s; Arguments: %s", word, args)

        if word in _NO_ARG_COMMANDS:
            return _NO_ARG_COMMANDS[word]()
        parser_cls = _PARSERS.get(word)
        if parser_cls is None:
            logger.debug("Unknown command word: %s", word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return parser_cls().parse(args)

"""Parser for the template command: ``template s/STATUS [m/MESSAGE]``."""

from reachbook.application.commands import TemplateCommand
from reachbook.application.errors import MESSAGE_INVALID_COMMAND_FORMAT, ParseError
from reachbook.application.parser import parser_util
from reachbook.application.parser.cli_syntax import PREFIX_MESSAGE, PREFIX_STATUS
from reachbook.application.parser.tokenizer import tokenize


class TemplateCommandParser:
    def parse(self, args: str) -> TemplateCommand:
        argmap = tokenize(args, PREFIX_STATUS, PREFIX_MESSAGE)
        if not argmap.has(PREFIX_STATUS) or argmap.preamble:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % TemplateCommand.MESSAGE_USAGE)
        argmap.verify_no_duplicate_prefixes_for(PREFIX_STATUS, PREFIX_MESSAGE)
        status = parser_util.parse_status(argmap.get_value(PREFIX_STATUS))
        return TemplateCommand(status, argmap.get_value(PREFIX_MESSAGE))

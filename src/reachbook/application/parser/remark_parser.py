"""Parser for the remark command: ``remark INDEX r/[REMARK]``."""

from reachbook.application.commands import RemarkCommand
from reachbook.application.errors import MESSAGE_INVALID_COMMAND_FORMAT, ParseError
from reachbook.application.parser import parser_util
from reachbook.application.parser.cli_syntax import PREFIX_REMARK
from reachbook.application.parser.tokenizer import tokenize


class RemarkCommandParser:
    def parse(self, args: str) -> RemarkCommand:
        """A missing r/ prefix yields an empty remark, which clears the existing one."""
        argmap = tokenize(args, PREFIX_REMARK)
        try:
            index = parser_util.parse_index(argmap.preamble)
        except ParseError as e:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % RemarkCommand.MESSAGE_USAGE) from e
        return RemarkCommand(index, parser_util.parse_remark(argmap.get_value(PREFIX_REMARK)))

"""Parser for the find command.

Two modes:
- bare: ``find alice bob`` matches names containing any keyword;
- prefixed: ``find n/alice t/friend s/contacted`` matches every supplied field.
The modes cannot be mixed.
"""

from reachbook.application.commands import FindCommand
from reachbook.application.errors import MESSAGE_INVALID_COMMAND_FORMAT, ParseError
from reachbook.application.parser import parser_util
from reachbook.application.parser.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_STATUS,
    PREFIX_TAG,
)
from reachbook.application.parser.tokenizer import tokenize
from reachbook.domain import NameContainsKeywordsPredicate, PersonMatchesKeywordsPredicate, Status

MESSAGE_INVALID_FILTER_DUPLICATE = "Only one filter per field is allowed at a time!"
MESSAGE_INVALID_STATUS = (
    "Invalid status provided: %s\nPlease use one of the following: "
    + ", ".join(s.display_name for s in Status)
)

_FILTER_PREFIXES = (PREFIX_NAME, PREFIX_TAG, PREFIX_STATUS, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
_SINGLE_USE_PREFIXES = (PREFIX_NAME, PREFIX_STATUS, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)


class FindCommandParser:
    def parse(self, args: str) -> FindCommand:
        """Parse the arguments of a find command. Raises ParseError on bad input."""
        argmap = tokenize(args, *_FILTER_PREFIXES)
        preamble = argmap.preamble

        if not any(argmap.has(p) for p in _FILTER_PREFIXES):
            if not preamble:
                raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % FindCommand.MESSAGE_USAGE)
            return FindCommand(NameContainsKeywordsPredicate(preamble.split()))

        try:
            for tag in argmap.get_all_values(PREFIX_TAG):
                parser_util.parse_tag(tag)
        except ParseError as e:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % e) from e

        if preamble:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % FindCommand.MESSAGE_USAGE)

        try:
            argmap.verify_no_duplicate_prefixes_for(*_SINGLE_USE_PREFIXES)
        except ParseError as e:
            raise ParseError(MESSAGE_INVALID_FILTER_DUPLICATE + "\n" + FindCommand.MESSAGE_USAGE) from e

        name = argmap.get_value(PREFIX_NAME)
        name_keywords = name.split() if name else []
        tag_keywords = [t for t in argmap.get_all_values(PREFIX_TAG) if t]

        status = None
        status_keyword = argmap.get_value(PREFIX_STATUS)
        if status_keyword is not None:
            try:
                status = parser_util.parse_status(status_keyword)
            except ParseError as e:
                raise ParseError(MESSAGE_INVALID_STATUS % status_keyword) from e

        return FindCommand(
            PersonMatchesKeywordsPredicate(
                name_keywords=name_keywords,
                tag_keywords=tag_keywords,
                status=status,
                phone=argmap.get_value(PREFIX_PHONE),
                email=argmap.get_value(PREFIX_EMAIL),
                address=argmap.get_value(PREFIX_ADDRESS),
            )
        )

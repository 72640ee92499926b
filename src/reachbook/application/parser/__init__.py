"""Command-line parsing: tokenizer, field parsers and one parser per command word."""

from reachbook.application.parser.address_book_parser import AddressBookParser
from reachbook.application.parser.find_parser import FindCommandParser
from reachbook.application.parser.person_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
)
from reachbook.application.parser.remark_parser import RemarkCommandParser
from reachbook.application.parser.template_parser import TemplateCommandParser

__all__ = [
    "AddCommandParser",
    "AddressBookParser",
    "DeleteCommandParser",
    "EditCommandParser",
    "FindCommandParser",
    "RemarkCommandParser",
    "TemplateCommandParser",
]

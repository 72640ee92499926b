"""Parsers for add, edit and delete."""

from reachbook.application.commands import AddCommand, DeleteCommand, EditCommand, EditPersonDescriptor
from reachbook.application.errors import MESSAGE_INVALID_COMMAND_FORMAT, ParseError
from reachbook.application.parser import parser_util
from reachbook.application.parser.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_STATUS,
    PREFIX_TAG,
)
from reachbook.application.parser.tokenizer import tokenize
from reachbook.domain import Person, Status


class AddCommandParser:
    def parse(self, args: str) -> AddCommand:
        argmap = tokenize(
            args,
            PREFIX_NAME,
            PREFIX_PHONE,
            PREFIX_EMAIL,
            PREFIX_ADDRESS,
            PREFIX_TAG,
            PREFIX_STATUS,
            PREFIX_REMARK,
        )
        required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
        if not all(argmap.has(p) for p in required) or argmap.preamble:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % AddCommand.MESSAGE_USAGE)

        argmap.verify_no_duplicate_prefixes_for(*required, PREFIX_STATUS, PREFIX_REMARK)
        status_raw = argmap.get_value(PREFIX_STATUS)
        person = Person(
            name=parser_util.parse_name(argmap.get_value(PREFIX_NAME)),
            phone=parser_util.parse_phone(argmap.get_value(PREFIX_PHONE)),
            email=parser_util.parse_email(argmap.get_value(PREFIX_EMAIL)),
            address=parser_util.parse_address(argmap.get_value(PREFIX_ADDRESS)),
            tags=parser_util.parse_tags(argmap.get_all_values(PREFIX_TAG)),
            status=parser_util.parse_status(status_raw) if status_raw is not None else Status.UNCONTACTED,
            remark=parser_util.parse_remark(argmap.get_value(PREFIX_REMARK)),
        )
        return AddCommand(person)


class EditCommandParser:
    def parse(self, args: str) -> EditCommand:
        argmap = tokenize(
            args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_STATUS, PREFIX_TAG
        )
        try:
            index = parser_util.parse_index(argmap.preamble)
        except ParseError as e:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % EditCommand.MESSAGE_USAGE) from e

        argmap.verify_no_duplicate_prefixes_for(
            PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_STATUS
        )

        def _field(prefix, parse):
            raw = argmap.get_value(prefix)
            return parse(raw) if raw is not None else None

        descriptor = EditPersonDescriptor(
            name=_field(PREFIX_NAME, parser_util.parse_name),
            phone=_field(PREFIX_PHONE, parser_util.parse_phone),
            email=_field(PREFIX_EMAIL, parser_util.parse_email),
            address=_field(PREFIX_ADDRESS, parser_util.parse_address),
            status=_field(PREFIX_STATUS, parser_util.parse_status),
            tags=self._parse_tags_for_edit(argmap.get_all_values(PREFIX_TAG)),
        )
        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)
        return EditCommand(index, descriptor)

    @staticmethod
    def _parse_tags_for_edit(raws: list[str]):
        """No t/ leaves tags alone; a single empty t/ clears them."""
        if not raws:
            return None
        if raws == [""]:
            return frozenset()
        return parser_util.parse_tags(raws)


class DeleteCommandParser:
    def parse(self, args: str) -> DeleteCommand:
        try:
            return DeleteCommand(parser_util.parse_index(args))
        except ParseError as e:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % DeleteCommand.MESSAGE_USAGE) from e

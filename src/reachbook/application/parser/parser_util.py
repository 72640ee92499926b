"""Turn raw argument strings into validated field values. Field errors become ParseError."""

import re
from collections.abc import Iterable

from reachbook.application.dto import Index
from reachbook.application.errors import ParseError
from reachbook.domain import Address, Email, Name, Phone, Remark, Status, Tag

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_UNSIGNED_INT_RE = re.compile(r"[0-9]+")


def parse_index(raw: str) -> Index:
    """Parse a one-based index. Leading and trailing whitespace is ignored."""
    trimmed = (raw or "").strip()
    if not _UNSIGNED_INT_RE.fullmatch(trimmed) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def _build(field_type, raw: str):
    try:
        return field_type((raw or "").strip())
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_name(raw: str) -> Name:
    return _build(Name, raw)


def parse_phone(raw: str) -> Phone:
    return _build(Phone, raw)


def parse_email(raw: str) -> Email:
    return _build(Email, raw)


def parse_address(raw: str) -> Address:
    return _build(Address, raw)


def parse_tag(raw: str) -> Tag:
    return _build(Tag, raw)


def parse_tags(raws: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(raw) for raw in raws)


def parse_status(raw: str) -> Status:
    try:
        return Status.parse(raw)
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_remark(raw: str | None) -> Remark:
    """Wrap raw as a Remark. None (prefix absent) becomes the empty remark."""
    return Remark(raw if raw is not None else "")

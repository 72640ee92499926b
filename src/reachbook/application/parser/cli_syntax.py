"""Argument prefixes understood by the command parsers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """A marker such as ``n/`` that introduces an argument value."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_STATUS = Prefix("s/")
PREFIX_REMARK = Prefix("r/")
PREFIX_MESSAGE = Prefix("m/")

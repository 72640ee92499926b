"""Value objects for Person fields. Each validates its raw string on construction."""

import re
from dataclasses import dataclass
from enum import Enum

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special characters, "
    "excluding the parentheses, (+_.-). The local-part may not start or end with any special "
    "characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of domain "
    "labels separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by hyphens, "
    "if any."
)

_ALNUM = r"[A-Za-z0-9]"
_NAME_RE = re.compile(rf"{_ALNUM}(?:{_ALNUM}| )*")
_PHONE_RE = re.compile(r"[0-9]{3,}")
_TAG_RE = re.compile(rf"{_ALNUM}+")
_LOCAL_PART = rf"{_ALNUM}+(?:[+_.-]{_ALNUM}+)*"
_DOMAIN_LABEL = rf"{_ALNUM}+(?:-{_ALNUM}+)*"
# Last domain label must be at least 2 characters long.
_DOMAIN_LAST = rf"(?={_ALNUM}[^.]*{_ALNUM}$){_DOMAIN_LABEL}"
_EMAIL_RE = re.compile(rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST}")


@dataclass(frozen=True)
class Name:
    value: str

    def __post_init__(self):
        if not self.value or _NAME_RE.fullmatch(self.value) is None:
            raise ValueError(NAME_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    value: str

    def __post_init__(self):
        if not self.value or _PHONE_RE.fullmatch(self.value) is None:
            raise ValueError(PHONE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        if not self.value or _EMAIL_RE.fullmatch(self.value) is None:
            raise ValueError(EMAIL_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    def __post_init__(self):
        # First character must not be whitespace; this also rejects blank values.
        if not self.value or self.value[0].isspace():
            raise ValueError(ADDRESS_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    name: str

    def __post_init__(self):
        if not self.name or _TAG_RE.fullmatch(self.name) is None:
            raise ValueError(TAG_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Remark:
    """Free-text note on a person. The empty string means no remark."""

    value: str = ""

    def __post_init__(self):
        if self.value is None:
            raise ValueError("Remark value must not be None.")

    def __str__(self) -> str:
        return self.value


class Status(Enum):
    """Outreach status of a person. Parsed case-insensitively by name."""

    UNCONTACTED = "UNCONTACTED"
    CONTACTED = "CONTACTED"
    REJECTED = "REJECTED"
    ACCEPTED = "ACCEPTED"
    UNREACHABLE = "UNREACHABLE"
    BUSY = "BUSY"

    @property
    def display_name(self) -> str:
        """Name with only the first letter capitalized, e.g. ``Contacted``."""
        return self.name[0] + self.name[1:].lower()

    @classmethod
    def parse(cls, raw: str) -> "Status":
        key = (raw or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(STATUS_CONSTRAINTS) from None

    def __str__(self) -> str:
        return self.display_name


STATUS_CONSTRAINTS = "Status should be one of: " + ", ".join(s.display_name for s in Status)

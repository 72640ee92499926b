"""Domain entity: Person."""

from dataclasses import dataclass, field, replace

from reachbook.domain.fields import Address, Email, Name, Phone, Remark, Status, Tag


@dataclass(frozen=True)
class Person:
    """
    Represents a contact in the address book.
    A Person is immutable; every edit produces a new Person with the other fields copied.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)
    status: Status = Status.UNCONTACTED
    remark: Remark = field(default_factory=Remark)

    def __post_init__(self):
        if self.name is None or self.phone is None or self.email is None or self.address is None:
            raise ValueError("Person name, phone, email and address are required.")
        if self.remark is None:
            raise ValueError("Person remark must not be None; use Remark('') for no remark.")
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """
        Weaker notion of equality used to detect duplicates: same name (case-insensitive),
        same phone, or same email.
        """
        if other is None:
            return False
        if other is self:
            return True
        return (
            self.name.value.lower() == other.name.value.lower()
            or self.phone == other.phone
            or self.email == other.email
        )

    def with_remark(self, remark: Remark) -> "Person":
        return replace(self, remark=remark)

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda t: t.name.lower())


def format_person(person: Person) -> str:
    """Render a person for user-facing feedback."""
    tags = "".join(str(t) for t in person.sorted_tags())
    return (
        f"{person.name}; Phone: {person.phone}; Email: {person.email}; "
        f"Address: {person.address}; Status: {person.status}; "
        f"Remark: {person.remark}; Tags: {tags}"
    )

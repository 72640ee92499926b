"""Domain layer: entities, field value objects and predicates. No dependencies on outer layers."""

from reachbook.domain.entities import Person, format_person
from reachbook.domain.fields import Address, Email, Name, Phone, Remark, Status, Tag
from reachbook.domain.predicates import (
    NameContainsKeywordsPredicate,
    PersonMatchesKeywordsPredicate,
    show_all_persons,
)

__all__ = [
    "Address",
    "Email",
    "Name",
    "NameContainsKeywordsPredicate",
    "Person",
    "PersonMatchesKeywordsPredicate",
    "Phone",
    "Remark",
    "Status",
    "Tag",
    "format_person",
    "show_all_persons",
]

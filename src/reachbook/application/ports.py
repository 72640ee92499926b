"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from reachbook.domain import Person, Status

PersonPredicate = Callable[[Person], bool]


class TemplateStorage(Protocol):
    """Durable mapping from Status to an editable message template."""

    def template_path(self, status: Status) -> Path:
        """Return the file that holds the template for status."""
        ...

    def read_template(self, status: Status) -> str:
        """Return the template for status, falling back to (and repairing with) the default."""
        ...

    def save_template(self, status: Status, content: str | None) -> None:
        """Persist content for status. Blank or None content stores the default instead."""
        ...

    def get_default_template(self, status: Status) -> str:
        """Return the built-in default for status. No I/O."""
        ...


class Model(Protocol):
    """In-memory address book with a filtered view, as consumed by commands."""

    template_storage: TemplateStorage

    def has_person(self, person: Person) -> bool:
        """True if a person with the same identity as person is in the book."""
        ...

    def add_person(self, person: Person) -> None:
        """Append person. The caller checks for duplicates first."""
        ...

    def delete_person(self, target: Person) -> None:
        """Remove target, which must be in the book."""
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target (which must be in the book) with edited, keeping its position."""
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Return the persons matching the current filter, in book order."""
        ...

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Replace the current filter."""
        ...

    def list_all(self) -> list[Person]:
        """Return every person in book order."""
        ...

    def clear(self) -> None:
        """Remove every person."""
        ...

"""In-memory implementation of Model (no persistence of the address book)."""

import logging
from collections.abc import Iterable

from reachbook.application.ports import PersonPredicate, TemplateStorage
from reachbook.domain import Person, show_all_persons

logger = logging.getLogger(__name__)


class InMemoryModel:
    """Stores persons in memory. Order preserved by insertion; edits keep the position.
    The filtered list is recomputed from the current predicate on every call.
    """

    def __init__(
        self,
        template_storage: TemplateStorage,
        persons: Iterable[Person] = (),
    ) -> None:
        self.template_storage = template_storage
        self._persons: list[Person] = []
        self._predicate: PersonPredicate = show_all_persons
        for person in persons:
            if not self.has_person(person):
                self._persons.append(person)

    def _position(self, target: Person) -> int:
        for i, person in enumerate(self._persons):
            if person == target:
                return i
        raise KeyError(f"Person not in address book: {target.name}")

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        self._persons.append(person)
        self._predicate = show_all_persons
        logger.debug("Added person %s", person.name)

    def delete_person(self, target: Person) -> None:
        del self._persons[self._position(target)]
        logger.debug("Deleted person %s", target.name)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons[self._position(target)] = edited
        logger.debug("Updated person %s", edited.name)

    def get_filtered_person_list(self) -> list[Person]:
        return [p for p in self._persons if self._predicate(p)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def list_all(self) -> list[Person]:
        return list(self._persons)

    def clear(self) -> None:
        self._persons.clear()

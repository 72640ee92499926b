"""Filters over persons, used by the find command and the filtered list view."""

from dataclasses import dataclass, field

from reachbook.domain.entities import Person
from reachbook.domain.fields import Status


def _contains_word_ignore_case(sentence: str, word: str) -> bool:
    """True if word matches a whole word of sentence, ignoring case. word must be a single word."""
    needle = word.strip().lower()
    if not needle:
        return False
    return needle in sentence.lower().split()


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches a person whose name contains any of the keywords as a whole word."""

    keywords: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def __call__(self, person: Person) -> bool:
        return any(_contains_word_ignore_case(person.name.value, k) for k in self.keywords)


@dataclass(frozen=True)
class PersonMatchesKeywordsPredicate:
    """
    Composite filter over optional per-field keywords. Fields left as None (or an empty
    keyword list) are not filtered on; supplied fields combine with AND.
    """

    name_keywords: tuple[str, ...] = field(default=())
    tag_keywords: tuple[str, ...] = field(default=())
    status: Status | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "name_keywords", tuple(self.name_keywords))
        object.__setattr__(self, "tag_keywords", tuple(self.tag_keywords))

    def __call__(self, person: Person) -> bool:
        if self.name_keywords and not any(
            _contains_word_ignore_case(person.name.value, k) for k in self.name_keywords
        ):
            return False
        if self.tag_keywords:
            person_tags = {t.name.lower() for t in person.tags}
            if not all(k.lower() in person_tags for k in self.tag_keywords):
                return False
        if self.status is not None and person.status is not self.status:
            return False
        if self.phone is not None and self.phone not in person.phone.value:
            return False
        if self.email is not None and self.email.lower() not in person.email.value.lower():
            return False
        if self.address is not None and self.address.lower() not in person.address.value.lower():
            return False
        return True


def show_all_persons(person: Person) -> bool:
    return True

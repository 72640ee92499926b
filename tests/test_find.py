"""Tests for FindCommandParser, the find predicates, and FindCommand / ListCommand."""

import pytest

from reachbook.application import FindCommand, ListCommand, ParseError
from reachbook.application.parser import FindCommandParser
from reachbook.domain import (
    Address,
    Email,
    Name,
    NameContainsKeywordsPredicate,
    Person,
    PersonMatchesKeywordsPredicate,
    Phone,
    Status,
    Tag,
)
from reachbook.infrastructure import InMemoryModel, TemplateStorageManager


def _person(name, phone, email, address, tags=(), status=Status.UNCONTACTED) -> Person:
    return Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        tags=frozenset(Tag(t) for t in tags),
        status=status,
    )


ALICE = _person("Alice Pauline", "94351253", "alice@example.com", "123 Jurong West", ["friends"], Status.CONTACTED)
BENSON = _person("Benson Meier", "98765432", "johnd@example.com", "311 Clementi Ave", ["owesMoney", "friends"])
CARL = _person("Carl Kurz", "95352563", "heinz@example.com", "wall street", [], Status.BUSY)


def _model(tmp_path) -> InMemoryModel:
    return InMemoryModel(TemplateStorageManager(tmp_path), [ALICE, BENSON, CARL])


def _parse(args: str) -> FindCommand:
    return FindCommandParser().parse(args)


def test_empty_args_is_usage_error() -> None:
    for args in ("", "   "):
        with pytest.raises(ParseError, match="Invalid command format"):
            _parse(args)


def test_bare_keywords_build_name_predicate() -> None:
    command = _parse(" \n Alice \n \t Bob  \t")
    assert command == FindCommand(NameContainsKeywordsPredicate(["Alice", "Bob"]))


def test_prefixed_builds_composite_predicate() -> None:
    command = _parse(" n/Alice Bob t/friends t/owesMoney s/contacted p/9435 e/example a/jurong")
    assert command == FindCommand(
        PersonMatchesKeywordsPredicate(
            name_keywords=["Alice", "Bob"],
            tag_keywords=["friends", "owesMoney"],
            status=Status.CONTACTED,
            phone="9435",
            email="example",
            address="jurong",
        )
    )


def test_prefixed_unsupplied_fields_stay_none() -> None:
    command = _parse("t/friends")
    predicate = command.predicate
    assert predicate.name_keywords == ()
    assert predicate.tag_keywords == ("friends",)
    assert predicate.status is None
    assert predicate.phone is None
    assert predicate.email is None
    assert predicate.address is None


def test_prefixed_with_preamble_is_usage_error() -> None:
    with pytest.raises(ParseError, match="Invalid command format"):
        _parse("Alice n/Bob")


def test_duplicate_single_use_prefix_rejected() -> None:
    with pytest.raises(ParseError, match="Only one filter per field is allowed at a time!"):
        _parse("n/Alice n/Bob")
    for args in ("s/busy s/contacted", "p/123 p/456", "e/a e/b", "a/x a/y"):
        with pytest.raises(ParseError, match="Only one filter per field"):
            _parse(args)


def test_tag_may_repeat() -> None:
    command = _parse("t/friends t/colleagues")
    assert command.predicate.tag_keywords == ("friends", "colleagues")


def test_invalid_tag_rejected() -> None:
    with pytest.raises(ParseError, match="alphanumeric"):
        _parse("t/best_friend")


def test_invalid_status_names_value() -> None:
    with pytest.raises(ParseError) as excinfo:
        _parse("n/Alice s/InvalidStatus")
    message = str(excinfo.value)
    assert "Invalid status provided: InvalidStatus" in message
    assert "Uncontacted, Contacted, Rejected, Accepted, Unreachable, Busy" in message


def test_status_is_case_insensitive() -> None:
    assert _parse("s/uNrEaChAbLe").predicate.status is Status.UNREACHABLE


def test_name_predicate_matches_whole_words_ignoring_case() -> None:
    predicate = NameContainsKeywordsPredicate(["alice", "CARL"])
    assert predicate(ALICE)
    assert predicate(CARL)
    assert not predicate(BENSON)
    assert not NameContainsKeywordsPredicate(["Ali"])(ALICE)
    assert not NameContainsKeywordsPredicate([])(ALICE)


def test_composite_predicate_ands_fields() -> None:
    assert PersonMatchesKeywordsPredicate(tag_keywords=["friends"])(ALICE)
    assert PersonMatchesKeywordsPredicate(tag_keywords=["FRIENDS", "owesmoney"])(BENSON)
    assert not PersonMatchesKeywordsPredicate(tag_keywords=["friends", "owesMoney"])(ALICE)
    assert PersonMatchesKeywordsPredicate(name_keywords=["alice"], status=Status.CONTACTED)(ALICE)
    assert not PersonMatchesKeywordsPredicate(name_keywords=["alice"], status=Status.BUSY)(ALICE)
    assert PersonMatchesKeywordsPredicate(phone="9876")(BENSON)
    assert PersonMatchesKeywordsPredicate(email="JOHND")(BENSON)
    assert PersonMatchesKeywordsPredicate(address="Clementi")(BENSON)
    assert not PersonMatchesKeywordsPredicate(address="Clementi")(CARL)


def test_composite_predicate_without_fields_matches_everyone() -> None:
    predicate = PersonMatchesKeywordsPredicate()
    assert all(predicate(p) for p in (ALICE, BENSON, CARL))


def test_find_command_filters_model(tmp_path) -> None:
    model = _model(tmp_path)
    result = _parse("t/friends").execute(model)
    assert result.feedback == "2 persons listed!"
    assert model.get_filtered_person_list() == [ALICE, BENSON]

    result = _parse("kurz").execute(model)
    assert result.feedback == "1 persons listed!"
    assert model.get_filtered_person_list() == [CARL]

    result = _parse("s/rejected").execute(model)
    assert result.feedback == "0 persons listed!"
    assert model.get_filtered_person_list() == []


def test_list_command_resets_filter(tmp_path) -> None:
    model = _model(tmp_path)
    _parse("Carl").execute(model)
    result = ListCommand().execute(model)
    assert result.feedback == "Listed all persons"
    assert model.get_filtered_person_list() == [ALICE, BENSON, CARL]

"""Add, edit, delete and clear persons."""

from dataclasses import dataclass, field, replace

from reachbook.application.commands.base import Command, person_at
from reachbook.application.dto import CommandResult, Index
from reachbook.application.errors import CommandError
from reachbook.application.ports import Model
from reachbook.domain import (
    Address,
    Email,
    Name,
    Person,
    Phone,
    Status,
    Tag,
    format_person,
    show_all_persons,
)

MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"


@dataclass(frozen=True)
class AddCommand(Command):
    person: Person

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        COMMAND_WORD
        + ": Adds a person to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [s/STATUS] [r/REMARK] [t/TAG]...\n"
        "Example: " + COMMAND_WORD + " n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 s/uncontacted t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS = "New person added: %s"

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(self.person))


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on a person. None means keep the current value."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    status: Status | None = None
    tags: frozenset[Tag] | None = field(default=None)

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (self.name, self.phone, self.email, self.address, self.status, self.tags)
        )

    def apply_to(self, person: Person) -> Person:
        changes = {
            k: v
            for k, v in (
                ("name", self.name),
                ("phone", self.phone),
                ("email", self.email),
                ("address", self.address),
                ("status", self.status),
                ("tags", self.tags),
            )
            if v is not None
        }
        return replace(person, **changes)


@dataclass(frozen=True)
class EditCommand(Command):
    index: Index
    descriptor: EditPersonDescriptor

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        COMMAND_WORD
        + ": Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[a/ADDRESS] [s/STATUS] [t/TAG]...\n"
        "Example: " + COMMAND_WORD + " 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited Person: %s"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def execute(self, model: Model) -> CommandResult:
        target = person_at(model, self.index)
        edited = self.descriptor.apply_to(target)
        others = [p for p in model.list_all() if p is not target and p != target]
        if any(edited.is_same_person(p) for p in others):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.set_person(target, edited)
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(edited))


@dataclass(frozen=True)
class DeleteCommand(Command):
    index: Index

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        COMMAND_WORD
        + ": Deletes the person identified by the index number used in the displayed "
        "person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: " + COMMAND_WORD + " 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: %s"

    def execute(self, model: Model) -> CommandResult:
        target = person_at(model, self.index)
        model.delete_person(target)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(target))


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = COMMAND_WORD + ": Deletes every person in the address book."
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.clear()
        return CommandResult(self.MESSAGE_SUCCESS)

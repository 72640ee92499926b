"""
Reachbook core: clean-architecture layout.

- domain: Person, field value objects (Name, Phone, ..., Status, Remark), predicates.
- application: commands, command-line parsers, ports (Model, TemplateStorage), DTOs.
- infrastructure: adapters (InMemoryModel, TemplateStorageManager, YAML seed loader).
"""

from reachbook.application import (
    AddressBookParser,
    Command,
    CommandError,
    CommandResult,
    Index,
    Model,
    ParseError,
    TemplateStorage,
)
from reachbook.domain import Person, Remark, Status
from reachbook.infrastructure import InMemoryModel, TemplateStorageManager

__all__ = [
    "AddressBookParser",
    "Command",
    "CommandError",
    "CommandResult",
    "InMemoryModel",
    "Index",
    "Model",
    "ParseError",
    "Person",
    "Remark",
    "Status",
    "TemplateStorage",
    "TemplateStorageManager",
]

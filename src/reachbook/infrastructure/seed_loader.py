"""Load sample persons from a YAML file. Used to populate the address book at start-up."""

import os
from pathlib import Path

import yaml

from reachbook.domain import Address, Email, Name, Person, Phone, Remark, Status, Tag

_REQUIRED_KEYS = ("name", "phone", "email", "address")


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def get_seed_path() -> Path | None:
    """Return path to the seed YAML (REACHBOOK_SEED_PATH env or data/sample_contacts.yaml).

    An explicit empty value or ``none`` disables seeding.
    """
    default = _repo_root() / "data" / "sample_contacts.yaml"
    if "REACHBOOK_SEED_PATH" not in os.environ:
        return default
    path = os.environ["REACHBOOK_SEED_PATH"].strip()
    if not path or path.lower() == "none":
        return None
    return Path(path).resolve()


def _person_from_entry(i: int, entry) -> Person:
    if not isinstance(entry, dict):
        raise ValueError(f"Seed entry {i} must be a mapping")
    missing = [k for k in _REQUIRED_KEYS if not entry.get(k)]
    if missing:
        raise ValueError(f"Seed entry {i} is missing: {', '.join(missing)}")
    tags = entry.get("tags") or []
    if not isinstance(tags, list):
        raise ValueError(f"Seed entry {i}: 'tags' must be a list")
    return Person(
        name=Name(str(entry["name"]).strip()),
        phone=Phone(str(entry["phone"]).strip()),
        email=Email(str(entry["email"]).strip()),
        address=Address(str(entry["address"]).strip()),
        tags=frozenset(Tag(str(t).strip()) for t in tags),
        status=Status.parse(str(entry["status"])) if entry.get("status") else Status.UNCONTACTED,
        remark=Remark(str(entry.get("remark") or "")),
    )


def load_seed(path: Path | None = None) -> list[Person]:
    """Load seed YAML and return its persons. A missing file yields no persons.

    Raises ValueError if the document or any entry is malformed.
    """
    if path is None:
        path = get_seed_path()
        if path is None:
            return []
    if not path.exists():
        return []
    raw = path.read_text(encoding="utf-8")
    doc = yaml.safe_load(raw)
    if doc is None:
        return []
    if not isinstance(doc, dict):
        raise ValueError("Seed YAML must be a dict")
    entries = doc.get("persons") or []
    if not isinstance(entries, list):
        raise ValueError("Seed 'persons' must be a list")
    return [_person_from_entry(i, entry) for i, entry in enumerate(entries, start=1)]

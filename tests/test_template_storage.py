"""Tests for TemplateStorageManager and TemplateCommand. Files live under pytest's tmp_path."""

import pytest

from reachbook.application import TemplateCommand
from reachbook.domain import Status
from reachbook.infrastructure import InMemoryModel, TemplateStorageManager, template_file_name

DEFAULT_CONTACTED = "This is the default template for status Contacted"
DEFAULT_UNCONTACTED = "This is the default template for status Uncontacted"


def _read(path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


@pytest.mark.parametrize(
    "status,expected",
    [
        (Status.UNCONTACTED, "Uncontacted"),
        (Status.CONTACTED, "Contacted"),
        (Status.REJECTED, "Rejected"),
        (Status.ACCEPTED, "Accepted"),
        (Status.UNREACHABLE, "Unreachable"),
        (Status.BUSY, "Busy"),
    ],
)
def test_default_template(tmp_path, status: Status, expected: str) -> None:
    storage = TemplateStorageManager(tmp_path)
    assert storage.get_default_template(status) == "This is the default template for status " + expected
    assert storage.get_default_template(status) == storage.get_default_template(status)
    assert list(tmp_path.iterdir()) == []


def test_file_names() -> None:
    assert template_file_name(Status.CONTACTED) == "contactedTemplate.txt"
    assert template_file_name(Status.UNREACHABLE) == "unreachableTemplate.txt"
    storage = TemplateStorageManager("templates")
    assert storage.template_path(Status.BUSY).name == "busyTemplate.txt"


def test_read_missing_file_returns_default_without_writing(tmp_path) -> None:
    storage = TemplateStorageManager(tmp_path)
    assert storage.read_template(Status.CONTACTED) == DEFAULT_CONTACTED
    assert not (tmp_path / "contactedTemplate.txt").exists()


def test_read_missing_directory_returns_default(tmp_path) -> None:
    storage = TemplateStorageManager(tmp_path / "not" / "there")
    assert storage.read_template(Status.BUSY) == "This is the default template for status Busy"
    assert not (tmp_path / "not").exists()


def test_read_existing_file_returns_content(tmp_path) -> None:
    _write(tmp_path / "contactedTemplate.txt", "Test template content")
    storage = TemplateStorageManager(tmp_path)
    assert storage.read_template(Status.CONTACTED) == "Test template content"


def test_read_blank_file_returns_default_and_replaces_file(tmp_path) -> None:
    path = tmp_path / "contactedTemplate.txt"
    _write(path, "   \t\n  ")
    storage = TemplateStorageManager(tmp_path)

    assert storage.read_template(Status.CONTACTED) == DEFAULT_CONTACTED
    assert _read(path) == DEFAULT_CONTACTED

    mtime = path.stat().st_mtime_ns
    assert storage.read_template(Status.CONTACTED) == DEFAULT_CONTACTED
    assert path.stat().st_mtime_ns == mtime


def test_read_empty_file_returns_default_and_replaces_file(tmp_path) -> None:
    path = tmp_path / "uncontactedTemplate.txt"
    _write(path, "")
    storage = TemplateStorageManager(tmp_path)
    assert storage.read_template(Status.UNCONTACTED) == DEFAULT_UNCONTACTED
    assert _read(path) == DEFAULT_UNCONTACTED


def test_save_new_file_creates_file(tmp_path) -> None:
    storage = TemplateStorageManager(tmp_path)
    storage.save_template(Status.CONTACTED, "New template")
    assert _read(tmp_path / "contactedTemplate.txt") == "New template"


def test_save_creates_missing_directory(tmp_path) -> None:
    storage = TemplateStorageManager(tmp_path / "data" / "templates")
    storage.save_template(Status.ACCEPTED, "Welcome aboard")
    assert _read(tmp_path / "data" / "templates" / "acceptedTemplate.txt") == "Welcome aboard"


def test_save_existing_file_overwrites(tmp_path) -> None:
    path = tmp_path / "contactedTemplate.txt"
    _write(path, "Old content")
    storage = TemplateStorageManager(tmp_path)
    storage.save_template(Status.CONTACTED, "Updated content")
    assert _read(path) == "Updated content"


@pytest.mark.parametrize("content", ["", "   ", "\t\t", "\n\n\n", " \t\n ", None])
def test_save_blank_or_none_saves_default(tmp_path, content) -> None:
    storage = TemplateStorageManager(tmp_path)
    storage.save_template(Status.CONTACTED, content)
    assert _read(tmp_path / "contactedTemplate.txt") == DEFAULT_CONTACTED
    assert storage.read_template(Status.CONTACTED) == DEFAULT_CONTACTED


def test_save_and_read_multiple_statuses(tmp_path) -> None:
    storage = TemplateStorageManager(tmp_path)
    storage.save_template(Status.CONTACTED, "Contacted template")
    storage.save_template(Status.REJECTED, "Rejected template")
    storage.save_template(Status.ACCEPTED, "Accepted template")

    assert storage.read_template(Status.CONTACTED) == "Contacted template"
    assert storage.read_template(Status.REJECTED) == "Rejected template"
    assert storage.read_template(Status.ACCEPTED) == "Accepted template"
    assert storage.read_template(Status.BUSY) == "This is the default template for status Busy"


@pytest.mark.parametrize("content", ["Line 1\nLine 2\nLine 3", "Dear X,\r\n\r\nThanks!\r\n", "  padded  "])
def test_save_preserves_content_exactly(tmp_path, content: str) -> None:
    storage = TemplateStorageManager(tmp_path)
    storage.save_template(Status.CONTACTED, content)
    assert storage.read_template(Status.CONTACTED) == content


def test_read_io_error_propagates(tmp_path) -> None:
    # A directory where the file should be makes open() fail with an OSError other than "not found".
    (tmp_path / "busyTemplate.txt").mkdir()
    storage = TemplateStorageManager(tmp_path)
    with pytest.raises(OSError):
        storage.read_template(Status.BUSY)


def test_template_command_show_and_save(tmp_path) -> None:
    model = InMemoryModel(TemplateStorageManager(tmp_path))

    shown = TemplateCommand(Status.REJECTED).execute(model)
    assert shown.feedback == (
        "Template for status Rejected:\nThis is the default template for status Rejected"
    )
    assert not (tmp_path / "rejectedTemplate.txt").exists()

    saved = TemplateCommand(Status.REJECTED, "Thanks for your time.").execute(model)
    assert saved.feedback == "Template for status Rejected saved:\nThanks for your time."
    assert _read(tmp_path / "rejectedTemplate.txt") == "Thanks for your time."

    reset = TemplateCommand(Status.REJECTED, "").execute(model)
    assert reset.feedback.endswith("This is the default template for status Rejected")


def test_non_ascii_content_is_stored_as_utf8(tmp_path) -> None:
    content = "Olá José — ¡gracias! 你好"
    storage = TemplateStorageManager(tmp_path)
    storage.save_template(Status.ACCEPTED, content)
    assert (tmp_path / "acceptedTemplate.txt").read_bytes() == content.encode("utf-8")
    assert storage.read_template(Status.ACCEPTED) == content


def test_read_undecodable_file_raises_and_keeps_file(tmp_path) -> None:
    path = tmp_path / "busyTemplate.txt"
    path.write_bytes(b"\xff\xfe bad bytes")
    storage = TemplateStorageManager(tmp_path)
    with pytest.raises(UnicodeDecodeError):
        storage.read_template(Status.BUSY)
    assert path.read_bytes() == b"\xff\xfe bad bytes"

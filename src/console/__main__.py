"""
Interactive console: reads one command per line and runs it against an in-memory address book.
Run: python -m console (from repo root, with .env or env vars set).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/console/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from reachbook.application import (  # noqa: E402
    ALL_COMMANDS,
    AddressBookParser,
    CommandError,
    CommandResult,
    ParseError,
)
from reachbook.domain import format_person  # noqa: E402
from reachbook.infrastructure import InMemoryModel, TemplateStorageManager, load_seed  # noqa: E402


def _log_level() -> int:
    """Return the level named by REACHBOOK_LOG_LEVEL, or INFO if unset or unrecognised."""
    level = logging.getLevelName(os.environ.get("REACHBOOK_LOG_LEVEL", "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_log_level(),
)
logger = logging.getLogger(__name__)

PROMPT = "> "


def _template_dir() -> Path:
    """Return the template directory (REACHBOOK_TEMPLATE_DIR env or data/templates)."""
    path = os.environ.get("REACHBOOK_TEMPLATE_DIR", "").strip()
    if path:
        return Path(path).resolve()
    return _REPO_ROOT / "data" / "templates"


def build_model() -> InMemoryModel:
    storage = TemplateStorageManager(_template_dir())
    persons = load_seed()
    logger.info("Loaded %d sample persons; templates in %s", len(persons), storage.directory)
    return InMemoryModel(storage, persons)


def help_text() -> str:
    return "\n\n".join(cmd.MESSAGE_USAGE for cmd in ALL_COMMANDS)


def render_list(model: InMemoryModel) -> str:
    shown = model.get_filtered_person_list()
    if not shown:
        return "(no persons to show)"
    return "\n".join(f"{i}. {format_person(p)}" for i, p in enumerate(shown, start=1))


def run_line(parser: AddressBookParser, model: InMemoryModel, line: str) -> CommandResult:
    """Parse and execute one line. ParseError and CommandError propagate to the caller."""
    command = parser.parse_command(line)
    return command.execute(model)


def main() -> None:
    model = build_model()
    parser = AddressBookParser()
    print("Reachbook. Type 'help' for commands, 'exit' to quit.")
    print(render_list(model))
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if not line.strip():
            continue
        try:
            result = run_line(parser, model, line)
        except (ParseError, CommandError) as e:
            print(e)
            continue
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Template storage error: %s", e)
            print(f"Could not read or write template file: {e}")
            continue
        print(result.feedback)
        if result.show_help:
            print(help_text())
        if result.exit:
            break
        print(render_list(model))
    logger.info("Session ended")


if __name__ == "__main__":
    main()

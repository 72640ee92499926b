"""File-backed message templates, one plain UTF-8 text file per status.

Files are named ``<status>Template.txt`` (e.g. ``contactedTemplate.txt``) under the
configured directory. A status whose file is missing reads as the built-in default; a
blank file is rewritten with the default when read. I/O errors are not masked.
"""

import logging
from pathlib import Path

from reachbook.domain import Status

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_PREFIX = "This is the default template for status "


def template_file_name(status: Status) -> str:
    return f"{status.name.lower()}Template.txt"


def default_template(status: Status) -> str:
    return DEFAULT_TEMPLATE_PREFIX + status.display_name


def _is_blank(content: str | None) -> bool:
    return content is None or not content.strip()


class TemplateStorageManager:
    """Reads and writes status templates under a directory."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def template_path(self, status: Status) -> Path:
        return self._directory / template_file_name(status)

    def get_default_template(self, status: Status) -> str:
        return default_template(status)

    def read_template(self, status: Status) -> str:
        path = self.template_path(status)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            return default_template(status)

        if _is_blank(content):
            logger.warning("Template file %s is blank; restoring default", path)
            default = default_template(status)
            self._write(path, default)
            return default
        return content

    def save_template(self, status: Status, content: str | None) -> None:
        """Blank or None content stores the default, so a template is never wiped to nothing."""
        to_save = default_template(status) if _is_blank(content) else content
        self._write(self.template_path(status), to_save)

    def _write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.info("Saved template %s", path.name)

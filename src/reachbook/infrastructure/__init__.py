"""Infrastructure layer: concrete implementations of application ports."""

from reachbook.infrastructure.memory_model import InMemoryModel
from reachbook.infrastructure.seed_loader import get_seed_path, load_seed
from reachbook.infrastructure.template_storage import (
    TemplateStorageManager,
    default_template,
    template_file_name,
)

__all__ = [
    "InMemoryModel",
    "TemplateStorageManager",
    "default_template",
    "get_seed_path",
    "load_seed",
    "template_file_name",
]

"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.memory_repository import InMemoryContactRepository
from addressbook.infrastructure.phone import format_phone

__all__ = [
    "InMemoryContactRepository",
    "format_phone",
]

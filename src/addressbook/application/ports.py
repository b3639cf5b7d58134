"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Any, Protocol

from addressbook.domain import Contact


class ContactRepository(Protocol):
    """Holds the ordered contacts of one collection."""

    def list_all(self) -> list[Contact]:
        """Return all contacts in current order."""
        ...

    def count(self) -> int:
        ...

    def append(self, contact: Contact) -> None:
        """Store a contact at the end."""
        ...

    def replace_at(self, index: int, contact: Contact) -> None:
        """Swap the contact at index for a new value."""
        ...

    def remove_at(self, index: int) -> Contact:
        """Remove and return the contact at index."""
        ...

    def reorder(self, key: Callable[[Contact], Any]) -> None:
        """Stable in-place sort by key."""
        ...

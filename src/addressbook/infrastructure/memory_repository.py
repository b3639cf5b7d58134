"""In-memory implementation of ContactRepository (no DB)."""

from collections.abc import Callable
from typing import Any

from addressbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in a list. Order is insertion order until reorder is called."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def count(self) -> int:
        return len(self._contacts)

    def append(self, contact: Contact) -> None:
        self._contacts.append(contact)

    def replace_at(self, index: int, contact: Contact) -> None:
        self._contacts[index] = contact

    def remove_at(self, index: int) -> Contact:
        return self._contacts.pop(index)

    def reorder(self, key: Callable[[Contact], Any]) -> None:
        # list.sort is stable; equal keys keep their current relative order.
        self._contacts.sort(key=key)

"""One named address book: add, edit, remove, search, filter, count and sort contacts."""

import locale
import logging

from addressbook.application.ports import ContactRepository
from addressbook.config import Settings
from addressbook.domain import Contact, DuplicateError, ValidationError, validate_contact

logger = logging.getLogger(__name__)


class ContactCollection:
    """Ordered contacts of one named collection.

    add and edit validate and reject duplicate first+last names (case-insensitive)
    by raising; a miss on remove, edit or search is returned as False or None.
    """

    def __init__(
        self,
        name: str,
        repository: ContactRepository,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.name = name
        self._repo = repository
        self._settings = settings or Settings()
        logger.info("Address book '%s' created.", name)

    def __len__(self) -> int:
        return self._repo.count()

    def __repr__(self) -> str:
        return f"ContactCollection(name={self.name!r}, size={self.size()})"

    def size(self) -> int:
        return self._repo.count()

    def contacts(self) -> list[Contact]:
        """Snapshot of the contacts in current order."""
        return self._repo.list_all()

    def _check(self, contact: Contact, *, skip_index: int | None = None) -> None:
        try:
            validate_contact(contact, self._settings)
        except ValidationError as e:
            logger.warning(
                "Rejected contact '%s' in '%s': %s", contact.full_name, self.name, e
            )
            raise
        for i, existing in enumerate(self._repo.list_all()):
            if i != skip_index and existing.same_person(contact):
                logger.warning(
                    "Duplicate contact '%s' in '%s'.", contact.full_name, self.name
                )
                raise DuplicateError(contact.first_name, contact.last_name)

    def add(self, contact: Contact) -> Contact:
        """Validate, reject duplicates, then append. Raises ValidationError or DuplicateError."""
        self._check(contact)
        self._repo.append(contact)
        logger.info("Contact '%s' added to '%s'.", contact.full_name, self.name)
        return contact

    def remove(self, identifier: str) -> bool:
        """Remove the first contact whose first name or "First Last" equals identifier (any case)."""
        needle = (identifier or "").strip().lower()
        for i, contact in enumerate(self._repo.list_all()):
            if needle in (contact.first_name.lower(), contact.full_name.lower()):
                self._repo.remove_at(i)
                logger.info(
                    "Contact with name '%s' has been removed from '%s'.",
                    identifier,
                    self.name,
                )
                return True
        logger.info("No contact found with name '%s' in '%s'.", identifier, self.name)
        return False

    def _index_of(self, first_name: str) -> int | None:
        for i, contact in enumerate(self._repo.list_all()):
            if contact.first_name == first_name:
                return i
        return None

    def edit(self, existing_first_name: str, contact: Contact) -> Contact | None:
        """Replace the whole record of the first contact named existing_first_name.

        Returns the new record, or None when no contact has that first name.
        """
        index = self._index_of(existing_first_name)
        if index is None:
            logger.info(
                "No contact found with first name '%s' in '%s'.",
                existing_first_name,
                self.name,
            )
            return None
        self._check(contact, skip_index=index)
        self._repo.replace_at(index, contact)
        logger.info(
            "Contact '%s' in '%s' updated to '%s'.",
            existing_first_name,
            self.name,
            contact.full_name,
        )
        return contact

    def search(self, first_name: str) -> Contact | None:
        """Return the first contact with exactly this first name, or None."""
        index = self._index_of(first_name)
        if index is None:
            return None
        return self._repo.list_all()[index]

    def filter_by_city(self, city: str) -> list[Contact]:
        needle = (city or "").lower()
        return [c for c in self._repo.list_all() if c.city.lower() == needle]

    def filter_by_state(self, state: str) -> list[Contact]:
        needle = (state or "").lower()
        return [c for c in self._repo.list_all() if c.state.lower() == needle]

    def count_by_city(self, city: str) -> int:
        return len(self.filter_by_city(city))

    def count_by_state(self, state: str) -> int:
        return len(self.filter_by_state(state))

    # Sorts start from the current order each time; they do not compose.

    def sort_by_name(self) -> None:
        self._repo.reorder(lambda c: locale.strxfrm(c.full_name))

    def sort_by_city(self) -> None:
        self._repo.reorder(lambda c: locale.strxfrm(c.city))

    def sort_by_state(self) -> None:
        self._repo.reorder(lambda c: locale.strxfrm(c.state))

    def sort_by_zip(self) -> None:
        self._repo.reorder(lambda c: c.zip)

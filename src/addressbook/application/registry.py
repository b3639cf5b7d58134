"""Registry: owns the address books created through it."""

import logging
from collections.abc import Callable

from addressbook.application.contact_collection import ContactCollection
from addressbook.application.ports import ContactRepository
from addressbook.config import Settings

logger = logging.getLogger(__name__)


class Registry:
    """Creates and lists collections. Names need not be unique."""

    def __init__(
        self,
        repository_factory: Callable[[], ContactRepository],
        *,
        settings: Settings | None = None,
    ) -> None:
        self._repository_factory = repository_factory
        self._settings = settings or Settings()
        self._collections: list[ContactCollection] = []

    def create_collection(self, name: str) -> ContactCollection:
        collection = ContactCollection(
            name, self._repository_factory(), settings=self._settings
        )
        self._collections.append(collection)
        return collection

    def list_collections(self) -> list[ContactCollection]:
        """Return all collections in creation order."""
        return list(self._collections)

    def get_collection(self, name: str) -> ContactCollection | None:
        """Return the first collection created with this name, or None."""
        for collection in self._collections:
            if collection.name == name:
                return collection
        return None

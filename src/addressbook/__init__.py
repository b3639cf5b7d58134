"""
Address book core: clean-architecture layout.

- domain: Contact value, errors, field validation. No outer dependencies.
- application: use cases (ContactCollection, Registry), ports (ContactRepository), text reports.
- infrastructure: adapters (InMemoryContactRepository, phone formatting).
"""

from addressbook.application import (
    ContactCollection,
    ContactRepository,
    Registry,
    format_contact,
    format_contact_list,
    format_search_result,
)
from addressbook.config import Settings, load_settings
from addressbook.domain import (
    AddressBookError,
    Contact,
    DuplicateError,
    ValidationError,
    first_validation_error,
    validate_contact,
)
from addressbook.infrastructure import InMemoryContactRepository

__all__ = [
    "AddressBookError",
    "Contact",
    "ContactCollection",
    "ContactRepository",
    "DuplicateError",
    "InMemoryContactRepository",
    "Registry",
    "Settings",
    "ValidationError",
    "first_validation_error",
    "format_contact",
    "format_contact_list",
    "format_search_result",
    "load_settings",
    "validate_contact",
]

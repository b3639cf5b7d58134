"""Domain layer: the Contact value, its errors and field rules. No dependencies on outer layers."""

from addressbook.domain.entities import Contact
from addressbook.domain.errors import AddressBookError, DuplicateError, ValidationError
from addressbook.domain.validation import first_validation_error, validate_contact

__all__ = [
    "AddressBookError",
    "Contact",
    "DuplicateError",
    "ValidationError",
    "first_validation_error",
    "validate_contact",
]

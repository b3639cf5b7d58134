"""Field rules for contacts. Checked in a fixed order; the first failure wins."""

import re

from addressbook.config import Settings
from addressbook.domain.entities import Contact
from addressbook.domain.errors import ValidationError

NAME_PATTERN = re.compile(r"[A-Z][a-z]{2,}")
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[A-Za-z]{2,}")
MIN_TEXT_LENGTH = 4


def _check_name(field: str, value: str) -> None:
    if not NAME_PATTERN.fullmatch(value):
        raise ValidationError(
            field, "must start with a capital letter followed by at least 2 lowercase letters."
        )


def _check_min_length(field: str, value: str) -> None:
    if len(value) < MIN_TEXT_LENGTH:
        raise ValidationError(field, f"must be at least {MIN_TEXT_LENGTH} characters.")


def _check_digits(field: str, value: str, length: int) -> None:
    if not re.fullmatch(rf"[0-9]{{{length}}}", value):
        raise ValidationError(field, f"must be exactly {length} digits.")


def validate_contact(contact: Contact, settings: Settings | None = None) -> None:
    """Raise ValidationError for the first field of contact that breaks its rule."""
    settings = settings or Settings()
    _check_name("first_name", contact.first_name)
    _check_name("last_name", contact.last_name)
    _check_min_length("address", contact.address)
    _check_min_length("city", contact.city)
    _check_min_length("state", contact.state)
    _check_digits("zip", contact.zip, settings.zip_length)
    _check_digits("phone", contact.phone, settings.phone_length)
    if not EMAIL_PATTERN.fullmatch(contact.email):
        raise ValidationError("email", "must look like local@domain.tld.")


def first_validation_error(
    contact: Contact, settings: Settings | None = None
) -> ValidationError | None:
    """Return the first failing rule as an error value, or None if contact is valid."""
    try:
        validate_contact(contact, settings)
    except ValidationError as e:
        return e
    return None

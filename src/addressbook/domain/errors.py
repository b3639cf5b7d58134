"""Errors raised by add and edit. Not-found is a value, never one of these."""


class AddressBookError(Exception):
    """Base class for address book errors."""


class ValidationError(AddressBookError, ValueError):
    """A contact field failed its rule. field names the first failing field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class DuplicateError(AddressBookError):
    """A contact with the same first and last name is already in the collection."""

    def __init__(self, first_name: str, last_name: str) -> None:
        super().__init__(f"Contact '{first_name} {last_name}' already exists.")
        self.first_name = first_name
        self.last_name = last_name

"""Plain-text rendering of collections and contacts for console or chat output."""

from addressbook.application.contact_collection import ContactCollection
from addressbook.domain import Contact
from addressbook.infrastructure.phone import format_phone

EMPTY_MESSAGE = "Address book is empty."
NOT_FOUND_MESSAGE = "Contact not found."


def format_contact_list(collection: ContactCollection) -> str:
    """Numbered list of full names, or the empty message."""
    contacts = collection.contacts()
    if not contacts:
        return EMPTY_MESSAGE
    lines = ["Contact List:"]
    for i, contact in enumerate(contacts, start=1):
        lines.append(f"{i}. {contact.full_name}")
    return "\n".join(lines)


def format_contact(contact: Contact, region: str | None = None) -> str:
    """Format one contact as a card: name, address lines, phone, email."""
    return "\n".join(
        [
            contact.full_name,
            contact.address,
            f"{contact.city}, {contact.state} {contact.zip}",
            f"Phone: {format_phone(contact.phone, region)}",
            f"Email: {contact.email}",
        ]
    )


def format_search_result(contact: Contact | None, region: str | None = None) -> str:
    if contact is None:
        return NOT_FOUND_MESSAGE
    return format_contact(contact, region)

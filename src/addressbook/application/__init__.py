"""Application layer: use cases, ports, and text reports. Depends on domain (and the phone formatter for reports)."""

from addressbook.application.contact_collection import ContactCollection
from addressbook.application.formatting import (
    format_contact,
    format_contact_list,
    format_search_result,
)
from addressbook.application.ports import ContactRepository
from addressbook.application.registry import Registry

__all__ = [
    "ContactCollection",
    "ContactRepository",
    "Registry",
    "format_contact",
    "format_contact_list",
    "format_search_result",
]

"""Domain entities: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    One entry of an address book.
    A Contact is immutable; an edit builds a new Contact and swaps it in.
    zip and phone are digit strings so leading zeros and exact lengths survive.
    """

    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def same_person(self, other: "Contact") -> bool:
        """True when first and last names match, ignoring case."""
        return (
            self.first_name.lower() == other.first_name.lower()
            and self.last_name.lower() == other.last_name.lower()
        )

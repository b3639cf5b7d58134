"""Unit tests for ContactCollection. In-memory repo only."""

import logging

import pytest

from addressbook.application import ContactCollection
from addressbook.config import Settings
from addressbook.domain import Contact, DuplicateError, ValidationError
from addressbook.infrastructure import InMemoryContactRepository


def _collection(name: str = "Family", **settings: int) -> ContactCollection:
    return ContactCollection(
        name, InMemoryContactRepository(), settings=Settings(**settings)
    )


def _contact(first: str = "John", last: str = "Doe", **changes: str) -> Contact:
    fields = dict(
        first_name=first,
        last_name=last,
        address="123 Elm St",
        city="Springfield",
        state="Ohio",
        zip="627011",
        phone="1234567890",
        email="john.doe@example.com",
    )
    fields.update(changes)
    return Contact(**fields)


def test_add_then_search_returns_same_contact() -> None:
    book = _collection()
    contact = _contact()
    assert book.add(contact) == contact
    assert book.size() == 1
    assert book.search("John") == contact


def test_add_invalid_raises_and_does_not_store() -> None:
    book = _collection()
    with pytest.raises(ValidationError) as exc:
        book.add(_contact(first="john", city="X"))
    assert exc.value.field == "first_name"
    assert book.size() == 0


def test_duplicate_name_rejected_case_insensitive() -> None:
    book = _collection()
    book.add(_contact())
    with pytest.raises(DuplicateError) as exc:
        book.add(_contact("John", "Doe", address="99 Other Rd", phone="9999999999"))
    assert exc.value.first_name == "John"
    assert exc.value.last_name == "Doe"
    assert book.size() == 1


def test_same_person_ignores_case() -> None:
    assert _contact("John", "Doe").same_person(_contact("JOHN", "doe", city="Columbus"))
    assert not _contact("John", "Doe").same_person(_contact("John", "Smith"))


def test_trailing_newline_does_not_sneak_in_duplicate() -> None:
    book = _collection()
    book.add(_contact())
    with pytest.raises(ValidationError) as exc:
        book.add(_contact("John\n", "Doe"))
    assert exc.value.field == "first_name"
    assert book.size() == 1


def test_same_first_name_different_last_name_allowed() -> None:
    book = _collection()
    book.add(_contact("John", "Doe"))
    book.add(_contact("John", "Smith"))
    assert book.size() == 2
    assert book.search("John").last_name == "Doe"


def test_remove_by_first_name() -> None:
    book = _collection()
    book.add(_contact("Jane", "Doe"))
    assert book.remove("Jane") is True
    assert book.size() == 0
    assert book.search("Jane") is None


def test_remove_by_full_name_any_case() -> None:
    book = _collection()
    book.add(_contact("Jane", "Doe"))
    book.add(_contact("Jane", "Roe"))
    assert book.remove("jane roe") is True
    assert [c.full_name for c in book.contacts()] == ["Jane Doe"]


def test_remove_takes_first_match_only() -> None:
    book = _collection()
    book.add(_contact("Jane", "Doe"))
    book.add(_contact("Jane", "Roe"))
    assert book.remove("JANE") is True
    assert [c.full_name for c in book.contacts()] == ["Jane Roe"]


def test_remove_missing_is_no_op(caplog) -> None:
    book = _collection()
    book.add(_contact())
    with caplog.at_level(logging.INFO):
        assert book.remove("Nobody") is False
    assert book.size() == 1
    assert "No contact found" in caplog.text


def test_edit_replaces_whole_record_in_place() -> None:
    book = _collection()
    book.add(_contact("Anna", "Smith"))
    book.add(_contact("John", "Doe"))
    book.add(_contact("Mark", "Lane"))
    new = _contact("Johnny", "Doe", city="Columbus", zip="627022")
    assert book.edit("John", new) == new
    assert [c.first_name for c in book.contacts()] == ["Anna", "Johnny", "Mark"]
    assert book.search("John") is None
    assert book.search("Johnny").city == "Columbus"


def test_edit_first_name_match_is_case_sensitive() -> None:
    book = _collection()
    book.add(_contact())
    assert book.edit("john", _contact(city="Columbus")) is None
    assert book.search("John").city == "Springfield"


def test_edit_missing_returns_none() -> None:
    book = _collection()
    assert book.edit("Ghost", _contact()) is None
    assert book.size() == 0


def test_edit_may_keep_own_name() -> None:
    book = _collection()
    book.add(_contact())
    updated = book.edit("John", _contact(city="Columbus"))
    assert updated is not None
    assert book.contacts() == [updated]


def test_edit_rejects_duplicate_of_other_contact() -> None:
    book = _collection()
    book.add(_contact("John", "Doe"))
    book.add(_contact("Anna", "Smith"))
    with pytest.raises(DuplicateError):
        book.edit("Anna", _contact("John", "Doe", city="Columbus"))
    assert book.search("Anna").last_name == "Smith"


def test_edit_invalid_leaves_record_unchanged() -> None:
    book = _collection()
    original = book.add(_contact())
    with pytest.raises(ValidationError) as exc:
        book.edit("John", _contact(phone="12"))
    assert exc.value.field == "phone"
    assert book.contacts() == [original]


def test_filter_and_count_by_city_and_state() -> None:
    book = _collection()
    book.add(_contact("Anna", "Smith", city="Columbus", state="Ohio"))
    book.add(_contact("John", "Doe", city="Springfield", state="Illinois"))
    book.add(_contact("Mark", "Lane", city="columbus", state="OHIO"))

    assert [c.first_name for c in book.filter_by_city("COLUMBUS")] == ["Anna", "Mark"]
    assert [c.first_name for c in book.filter_by_state("ohio")] == ["Anna", "Mark"]
    assert book.count_by_city("Columbus") == 2
    assert book.count_by_state("Illinois") == 1
    assert book.filter_by_city("Dayton") == []
    assert book.count_by_state("Texas") == 0


def test_filter_is_equality_not_substring() -> None:
    book = _collection()
    book.add(_contact(city="Springfield"))
    assert book.filter_by_city("Spring") == []


def test_sorts_do_not_compose() -> None:
    book = _collection()
    book.add(_contact("Mark", "Lane", zip="100001"))
    book.add(_contact("Anna", "Smith", zip="300003"))
    book.add(_contact("John", "Doe", zip="200002"))

    book.sort_by_zip()
    assert [c.zip for c in book.contacts()] == ["100001", "200002", "300003"]
    book.sort_by_name()
    assert [c.full_name for c in book.contacts()] == ["Anna Smith", "John Doe", "Mark Lane"]


def test_sort_by_city_and_state_is_stable() -> None:
    book = _collection()
    book.add(_contact("Mark", "Lane", city="Dayton", state="Ohio"))
    book.add(_contact("Anna", "Smith", city="Austin", state="Texas"))
    book.add(_contact("John", "Doe", city="Dayton", state="Ohio"))

    book.sort_by_city()
    assert [c.first_name for c in book.contacts()] == ["Anna", "Mark", "John"]
    book.sort_by_state()
    assert [c.first_name for c in book.contacts()] == ["Mark", "John", "Anna"]


def test_sort_by_name_uses_last_name_to_break_ties() -> None:
    book = _collection()
    book.add(_contact("John", "Smith"))
    book.add(_contact("John", "Adams"))
    book.sort_by_name()
    assert [c.last_name for c in book.contacts()] == ["Adams", "Smith"]


def test_contacts_returns_snapshot() -> None:
    book = _collection()
    book.add(_contact())
    snapshot = book.contacts()
    snapshot.clear()
    assert len(book) == 1


def test_zip_length_setting_applies_to_add() -> None:
    book = _collection(zip_length=5)
    book.add(_contact(zip="62701"))
    with pytest.raises(ValidationError):
        book.add(_contact("Anna", "Smith", zip="627011"))


def test_family_scenario() -> None:
    book = _collection("Family", zip_length=5)
    book.add(
        Contact("John", "Doe", "123 Elm St", "Springfield", "Ohio", "62701",
                "1234567890", "john.doe@example.com")
    )
    assert book.size() == 1

    with pytest.raises(DuplicateError):
        book.add(
            Contact("John", "Doe", "9 Pine Ave", "Dayton", "Ohio", "45402",
                    "5556667777", "jd@example.com")
        )
    assert book.size() == 1

    edited = book.edit(
        "John",
        Contact("John", "Doe", "456 Oak", "Columbus", "Ohio", "62702",
                "1112223333", "john2@example.com"),
    )
    assert edited is not None
    assert book.size() == 1
    assert book.search("John").address == "456 Oak"

    assert book.remove("John") is True
    assert book.size() == 0


def test_rejections_are_logged_as_warnings(caplog) -> None:
    book = _collection()
    book.add(_contact())
    with caplog.at_level(logging.WARNING):
        with pytest.raises(DuplicateError):
            book.add(_contact())
        with pytest.raises(ValidationError):
            book.add(_contact("Anna", "smith"))
    assert "Duplicate contact 'John Doe'" in caplog.text
    assert "Rejected contact 'Anna smith'" in caplog.text

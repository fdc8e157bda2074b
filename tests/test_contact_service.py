"""Unit tests for ContactService. No HTTP; in-memory repo and ContactInput only."""

import itertools

import pytest

from phonebook.application import (
    MISSING_FIELDS_REASON,
    ContactCreated,
    ContactInput,
    ContactService,
    Duplicate,
    Invalid,
    MalformedIdError,
)
from phonebook.infrastructure import SEED_CONTACTS, InMemoryContactRepository


def _service(seed=SEED_CONTACTS) -> ContactService:
    ids = itertools.count(100)
    return ContactService(
        repository=InMemoryContactRepository(seed, id_factory=lambda: next(ids))
    )


def test_create_contact_assigns_id_and_lists_it() -> None:
    service = _service(seed=())
    result = service.create_contact(ContactInput(name="Alice", phone_number="040-1"))
    assert isinstance(result, ContactCreated)
    assert result.contact.id == 100
    assert result.contact.name == "Alice"
    assert result.contact.phone_number == "040-1"

    listed = service.list_contacts()
    assert [c.id for c in listed] == [100]


def test_create_strips_whitespace() -> None:
    service = _service(seed=())
    result = service.create_contact(ContactInput(name="  Bob  ", phone_number=" 123 "))
    assert isinstance(result, ContactCreated)
    assert result.contact.name == "Bob"
    assert result.contact.phone_number == "123"


@pytest.mark.parametrize(
    "data",
    [
        ContactInput(name=None, phone_number="123"),
        ContactInput(name="Carol", phone_number=None),
        ContactInput(name="", phone_number="123"),
        ContactInput(name="Carol", phone_number="   "),
        ContactInput(),
    ],
)
def test_missing_field_is_invalid(data) -> None:
    service = _service()
    result = service.create_contact(data)
    assert isinstance(result, Invalid)
    assert result.reason == MISSING_FIELDS_REASON
    assert service.count_contacts() == len(SEED_CONTACTS)


def test_missing_field_checked_before_duplicate() -> None:
    service = _service()
    result = service.create_contact(ContactInput(name="Arto Hellas"))
    assert isinstance(result, Invalid)


def test_duplicate_name_case_insensitive() -> None:
    service = _service()
    result = service.create_contact(ContactInput(name="arto HELLAS", phone_number="1"))
    assert isinstance(result, Duplicate)
    assert result.name == "arto HELLAS"
    assert result.reason == "The name arto HELLAS already exists in the phonebook"
    assert service.count_contacts() == len(SEED_CONTACTS)


def test_get_contact_by_raw_id() -> None:
    service = _service()
    contact = service.get_contact("2")
    assert contact is not None
    assert contact.name == "Ada Lovelace"


def test_get_contact_unknown_or_malformed_returns_none() -> None:
    service = _service()
    assert service.get_contact("999999") is None
    assert service.get_contact("abc") is None


def test_delete_contact_removes_it() -> None:
    service = _service()
    assert service.delete_contact("1") is True
    assert service.get_contact("1") is None
    assert "Arto Hellas" not in [c.name for c in service.list_contacts()]


def test_delete_unknown_contact_is_noop() -> None:
    service = _service()
    assert service.delete_contact("999999") is False
    assert service.count_contacts() == len(SEED_CONTACTS)


def test_delete_malformed_id_raises() -> None:
    service = _service()
    with pytest.raises(MalformedIdError) as exc_info:
        service.delete_contact("not-a-number")
    assert exc_info.value.raw_id == "not-a-number"
    assert str(exc_info.value) == "Malformed id not-a-number"


def test_deleted_name_can_be_reused() -> None:
    service = _service()
    service.delete_contact("1")
    result = service.create_contact(ContactInput(name="Arto Hellas", phone_number="1"))
    assert isinstance(result, ContactCreated)


def test_count_contacts_uses_repository_count() -> None:
    class CountOnlyRepository(InMemoryContactRepository):
        def list_all(self):
            raise AssertionError("count_contacts must not list contacts")

    service = ContactService(CountOnlyRepository(SEED_CONTACTS))
    assert service.count_contacts() == len(SEED_CONTACTS)


@pytest.mark.parametrize("raw_id", ["0_1", " 1", "\u0663"])
def test_non_ascii_digit_ids_are_malformed(raw_id) -> None:
    service = _service()
    assert service.get_contact(raw_id) is None
    with pytest.raises(MalformedIdError):
        service.delete_contact(raw_id)
    assert service.count_contacts() == len(SEED_CONTACTS)

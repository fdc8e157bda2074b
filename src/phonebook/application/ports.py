"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Contact, ContactId


class ContactRepository(Protocol):
    """Persists and queries contacts. Exactly one implementation is active per process."""

    def parse_id(self, raw_id: str) -> ContactId:
        """Convert a raw path segment to this store's id type. Raises MalformedIdError."""
        ...

    def add(self, name: str, phone_number: str) -> Contact:
        """Assign a fresh id, store the contact and return it."""
        ...

    def get_by_id(self, contact_id: ContactId) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order (or any stable order)."""
        ...

    def count(self) -> int:
        """Return the number of stored contacts."""
        ...

    def find_by_name(self, name: str) -> Contact | None:
        """Return an existing contact whose name matches case-insensitively, or None."""
        ...

    def delete_by_id(self, contact_id: ContactId) -> bool:
        """Remove the contact. Returns True if removed, False if there was none."""
        ...

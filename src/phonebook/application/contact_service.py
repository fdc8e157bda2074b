"""Contact creation, lookup, listing and deletion."""

import logging

from phonebook.application.dto import ContactCreated, ContactInput, Duplicate, Invalid
from phonebook.application.errors import MalformedIdError
from phonebook.application.ports import ContactRepository
from phonebook.domain import Contact

logger = logging.getLogger(__name__)

MISSING_FIELDS_REASON = "The name or number is missing"


class ContactService:
    """Validates input and delegates storage to the repository."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def create_contact(self, data: ContactInput) -> ContactCreated | Duplicate | Invalid:
        """Create a contact. Checks required fields first, then name uniqueness."""
        name = (data.name or "").strip()
        phone = (data.phone_number or "").strip()
        if not name or not phone:
            return Invalid(reason=MISSING_FIELDS_REASON)

        # Check and insert are not atomic; concurrent creates may both pass.
        if self._repo.find_by_name(name) is not None:
            return Duplicate(name=name)

        contact = self._repo.add(name, phone)
        logger.info("Created contact %s (%s)", contact.id, contact.name)
        return ContactCreated(contact=contact)

    def list_contacts(self) -> list[Contact]:
        return self._repo.list_all()

    def count_contacts(self) -> int:
        return self._repo.count()

    def get_contact(self, raw_id: str) -> Contact | None:
        """Return a contact by raw id, or None if not found or the id is malformed."""
        try:
            contact_id = self._repo.parse_id(raw_id)
        except MalformedIdError:
            return None
        return self._repo.get_by_id(contact_id)

    def delete_contact(self, raw_id: str) -> bool:
        """Delete a contact by raw id. Raises MalformedIdError; unknown ids are a no-op."""
        contact_id = self._repo.parse_id(raw_id)
        removed = self._repo.delete_by_id(contact_id)
        if removed:
            logger.info("Deleted contact %s", contact_id)
        return removed

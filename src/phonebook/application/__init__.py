"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from phonebook.application.contact_service import MISSING_FIELDS_REASON, ContactService
from phonebook.application.dto import ContactCreated, ContactInput, Duplicate, Invalid
from phonebook.application.errors import MalformedIdError
from phonebook.application.ports import ContactRepository

__all__ = [
    "MISSING_FIELDS_REASON",
    "ContactCreated",
    "ContactInput",
    "ContactRepository",
    "ContactService",
    "Duplicate",
    "Invalid",
    "MalformedIdError",
]

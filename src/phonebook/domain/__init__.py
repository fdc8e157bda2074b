"""Domain layer: entities. No dependencies on outer layers."""

from phonebook.domain.entities import Contact, ContactId

__all__ = ["Contact", "ContactId"]

"""
Phonebook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, Neo4jContactRepository).
"""

from phonebook.application import (
    ContactCreated,
    ContactInput,
    ContactRepository,
    ContactService,
    Duplicate,
    Invalid,
    MalformedIdError,
)
from phonebook.domain import Contact, ContactId
from phonebook.infrastructure import InMemoryContactRepository, Neo4jContactRepository

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactId",
    "ContactInput",
    "ContactRepository",
    "ContactService",
    "Duplicate",
    "InMemoryContactRepository",
    "Invalid",
    "MalformedIdError",
    "Neo4jContactRepository",
]

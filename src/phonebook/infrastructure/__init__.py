"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.identity import generate_id
from phonebook.infrastructure.memory_repository import (
    SEED_CONTACTS,
    InMemoryContactRepository,
)
from phonebook.infrastructure.persistence.neo4j_repository import (
    Neo4jContactRepository,
    ensure_contact_constraint,
)

__all__ = [
    "SEED_CONTACTS",
    "InMemoryContactRepository",
    "Neo4jContactRepository",
    "ensure_contact_constraint",
    "generate_id",
]

"""Neo4j implementation of ContactRepository.
Each contact is one (:Contact {id, name, name_key, phone_number, created_at}) node.
Ids are UUID4 strings assigned here at insert time; name_key is the lowercased
name used for case-insensitive lookups.
"""

import logging
import uuid
from datetime import datetime

from phonebook.application.errors import MalformedIdError
from phonebook.domain import Contact

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
FOR (c:Contact) REQUIRE c.id IS UNIQUE
"""


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat(timespec="microseconds")


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def ensure_contact_constraint(driver: object) -> None:
    """Create the uniqueness constraint on Contact.id if missing. Idempotent."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)
    logger.info("Ensured Contact.id uniqueness constraint")


class Neo4jContactRepository:
    """Stores contacts as Contact nodes in Neo4j, ordered by created_at."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def parse_id(self, raw_id: str) -> str:
        try:
            return str(uuid.UUID(str(raw_id)))
        except ValueError:
            raise MalformedIdError(raw_id) from None

    def add(self, name: str, phone_number: str) -> Contact:
        contact = Contact(id=str(uuid.uuid4()), name=name, phone_number=phone_number)
        with self._driver.session() as session:
            session.run(
                """
                CREATE (c:Contact {
                    id: $id,
                    name: $name,
                    name_key: $name_key,
                    phone_number: $phone_number,
                    created_at: $created_at
                })
                """,
                id=contact.id,
                name=contact.name,
                name_key=contact.name.lower(),
                phone_number=contact.phone_number,
                created_at=_datetime_to_iso(contact.created_at),
            )
        return contact

    def get_by_id(self, contact_id: str) -> Contact | None:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact {id: $id})
                RETURN c
                """,
                id=contact_id,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_contact(record)

    def list_all(self) -> list[Contact]:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact)
                RETURN c
                ORDER BY c.created_at
                """
            )
            return [_record_to_contact(rec) for rec in result]

    def count(self) -> int:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact)
                RETURN count(c) AS total
                """
            )
            return result.single()["total"]

    def find_by_name(self, name: str) -> Contact | None:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact)
                WHERE c.name_key = $name_key
                RETURN c
                LIMIT 1
                """,
                name_key=name.strip().lower(),
            )
            record = result.single()
        if not record:
            return None
        return _record_to_contact(record)

    def delete_by_id(self, contact_id: str) -> bool:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact {id: $id})
                DETACH DELETE c
                RETURN count(*) AS deleted
                """,
                id=contact_id,
            )
            return result.single()["deleted"] > 0


def _record_to_contact(record) -> Contact:
    c = record["c"]
    return Contact(
        id=c["id"],
        name=c["name"],
        phone_number=c["phone_number"],
        created_at=_iso_to_datetime(c["created_at"]),
    )

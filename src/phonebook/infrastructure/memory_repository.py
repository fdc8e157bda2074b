"""In-memory implementation of ContactRepository (no DB)."""

from collections.abc import Callable, Iterable

from phonebook.application.errors import MalformedIdError
from phonebook.domain import Contact
from phonebook.infrastructure.identity import generate_id

SEED_CONTACTS = (
    Contact(id=1, name="Arto Hellas", phone_number="040-123456"),
    Contact(id=2, name="Ada Lovelace", phone_number="39-44-5323523"),
    Contact(id=3, name="Dan Abramov", phone_number="12-43-234345"),
    Contact(id=4, name="Mary Poppendieck", phone_number="39-23-6423122"),
)


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.
    Ids are random integers; a colliding id is stored alongside the existing one.
    """

    def __init__(
        self,
        contacts: Iterable[Contact] = (),
        *,
        id_factory: Callable[[], int] = generate_id,
    ) -> None:
        self._contacts: list[Contact] = list(contacts)
        self._id_factory = id_factory

    def parse_id(self, raw_id: str) -> int:
        # Plain ASCII digits only
        if not (isinstance(raw_id, str) and raw_id.isascii() and raw_id.isdigit()):
            raise MalformedIdError(raw_id)
        return int(raw_id)

    def add(self, name: str, phone_number: str) -> Contact:
        contact = Contact(id=self._id_factory(), name=name, phone_number=phone_number)
        self._contacts.append(contact)
        return contact

    def get_by_id(self, contact_id: int) -> Contact | None:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def count(self) -> int:
        return len(self._contacts)

    def find_by_name(self, name: str) -> Contact | None:
        needle = name.strip().lower()
        for contact in self._contacts:
            if contact.name.lower() == needle:
                return contact
        return None

    def delete_by_id(self, contact_id: int) -> bool:
        before = len(self._contacts)
        self._contacts = [c for c in self._contacts if c.id != contact_id]
        return len(self._contacts) != before

"""Input and result types exchanged between the API and ContactService."""

from dataclasses import dataclass

from phonebook.domain import Contact


@dataclass(frozen=True)
class ContactInput:
    """Allow-listed create payload. Fields may be missing; the service validates."""

    name: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class ContactCreated:
    contact: Contact


@dataclass(frozen=True)
class Invalid:
    reason: str


@dataclass(frozen=True)
class Duplicate:
    """A contact with the same name (case-insensitive) already exists."""

    name: str

    @property
    def reason(self) -> str:
        return f"The name {self.name} already exists in the phonebook"

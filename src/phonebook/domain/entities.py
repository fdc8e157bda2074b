"""Domain entities: Contact."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Ephemeral stores use integer ids, durable stores use UUID strings.
ContactId = int | str


@dataclass(frozen=True)
class Contact:
    """
    A phonebook entry.
    The id is assigned by the store at insert time and never changes.
    """

    id: ContactId
    name: str = field(default="")
    phone_number: str = field(default="")
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")

        if not self.phone_number or not self.phone_number.strip():
            raise ValueError("Contact phone number must be non-empty.")

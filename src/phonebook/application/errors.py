"""Errors raised across the application boundary."""


class MalformedIdError(ValueError):
    """The raw id is not a valid id for the active store."""

    def __init__(self, raw_id: str) -> None:
        super().__init__(f"Malformed id {raw_id}")
        self.raw_id = raw_id

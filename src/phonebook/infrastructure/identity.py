"""Id generation for the in-memory store."""

import random

ID_MIN = 100
ID_MAX = 100_000


def generate_id() -> int:
    """Return a random id in [ID_MIN, ID_MAX).

    Uniqueness is best-effort: there is no collision check against
    existing ids.
    """
    return random.randrange(ID_MIN, ID_MAX)

"""Tests for random id generation used by the in-memory store."""

import random

from phonebook.infrastructure.identity import ID_MAX, ID_MIN, generate_id


def test_generate_id_within_range():
    for _ in range(1000):
        value = generate_id()
        assert isinstance(value, int)
        assert ID_MIN <= value < ID_MAX


def test_generate_id_bounds():
    assert ID_MIN == 100
    assert ID_MAX == 100_000


def test_generate_id_uses_module_random(monkeypatch):
    monkeypatch.setattr(random, "randrange", lambda lo, hi: lo)
    assert generate_id() == ID_MIN

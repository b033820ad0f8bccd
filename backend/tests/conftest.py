"""Shared fixtures for the test suite."""

import pytest

from gatekeep import ArrayOf, Num, Str, WithOptional, union
from gatekeep.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def user_descriptor():
    """A user record with required id/name and optional tags/nickname."""
    return WithOptional(
        {"id": Num, "name": Str},
        {"tags": ArrayOf(Str), "nickname": union([Str, None])},
    )


@pytest.fixture
def calls():
    """Records the values a spy predicate is called with."""
    seen = []

    def spy(value):
        seen.append(value)
        return True

    spy.seen = seen
    return spy

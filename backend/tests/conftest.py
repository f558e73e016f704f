"""Root conftest: shared fakes for the boundary protocols."""

import pytest

from tests.fakes import FakeChannel, FakeValueCache, FakeValueStore


@pytest.fixture
def store():
    return FakeValueStore()


@pytest.fixture
def cache():
    return FakeValueCache()


@pytest.fixture
def channel():
    return FakeChannel()

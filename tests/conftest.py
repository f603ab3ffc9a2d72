from __future__ import annotations

import pytest

from fakes import FakePasswordHasher, FakeStorage, SequentialIdGenerator


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()

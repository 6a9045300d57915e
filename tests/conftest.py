from __future__ import annotations

import pytest

from partial_updater.books import InMemoryBookStore


@pytest.fixture
def store() -> InMemoryBookStore:
    return InMemoryBookStore()

"""
- Provide a scripted random source so secrets are predictable.
- Provide a store fixture (fresh in-memory GameStore per test).
- Provide a client fixture (TestClient(app)) with get_store overridden so routes use that store.
"""
import os
from itertools import cycle

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "test")
os.environ.pop("MASTERMIND_SEED", None)

from mastermind.main import app, get_store
from mastermind.store import GameStore

SECRET = ("red", "blue", "green", "yellow")


class ScriptedRandom:
    """Stands in for random.Random: .choice() hands out the given colors in a loop."""

    def __init__(self, colors):
        self._colors = cycle(colors)

    def choice(self, seq):
        color = next(self._colors)
        assert color in seq
        return color


@pytest.fixture
def scripted_rng():
    return ScriptedRandom(SECRET)


@pytest.fixture
def store(scripted_rng) -> GameStore:
    # Every game in this store gets SECRET as its secret
    return GameStore(rng=scripted_rng)


@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use the test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)

"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat client / repository boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_chord_repository
from api.main import app
from core.chords import DEFAULT_REPOSITORY, ChordMapRepository

# ---------------------------------------------------------------------------
# Chord tables
# ---------------------------------------------------------------------------


@pytest.fixture()
def repository() -> ChordMapRepository:
    """The shared, import-time chord repository."""
    return DEFAULT_REPOSITORY


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` with the chord repository dependency pinned.

    The override is removed after the test so other modules see the
    app's real dependency graph.
    """
    app.dependency_overrides[get_chord_repository] = lambda: DEFAULT_REPOSITORY
    yield TestClient(app)
    app.dependency_overrides.clear()

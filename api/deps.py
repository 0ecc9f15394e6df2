"""
FastAPI dependency providers.

The chord tables are built once, when core.chords.repository is imported,
and shared read-only by every request. Overriding get_chord_repository in
tests swaps in a custom ChordMapRepository without touching the core.
"""

from core.chords.repository import DEFAULT_REPOSITORY, ChordMapRepository


def get_chord_repository() -> ChordMapRepository:
    """Return the shared, immutable chord-table repository."""
    return DEFAULT_REPOSITORY

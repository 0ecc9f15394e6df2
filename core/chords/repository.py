"""
core/chords/repository.py — ChordMapRepository: every interval-key → name table.

Three tables, consulted in this priority order:
    static               curated idioms loaded from data/static_chords.yaml
    generated            compositional table without omission markers
    generated_omit       compositional table including "(omitN)" spellings

YAML static table
-----------------
Located at core/chords/data/static_chords.yaml. Each entry lists an
interval vector and one or more suffixes; the first suffix is preferred.

Design decisions:
    - The repository is a frozen value. DEFAULT_REPOSITORY is built once,
      eagerly, when this module is imported, so the first detection call
      pays no generation cost. Callers may build and pass their own.
    - Tables are MappingProxyType views over tuples — read-only, so the
      shared instance is safe for any number of concurrent readers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from core.chords.generator import ChordMap, generate_chord_map, generate_chord_names
from core.chords.types import (
    CHORD_SOURCES,
    SOURCE_GENERATED,
    SOURCE_GENERATED_OMIT,
    SOURCE_STATIC,
    IntervalVector,
)

logger = logging.getLogger(__name__)

STATIC_TABLE_PATH: Path = Path(__file__).parent / "data" / "static_chords.yaml"

# ---------------------------------------------------------------------------
# Static table loading
# ---------------------------------------------------------------------------


def _parse_static_entries(data: Any, source: Path) -> ChordMap:
    """Validate parsed YAML and index it by interval key.

    Raises:
        ValueError: If the document shape or any entry is invalid.
    """
    if not isinstance(data, dict) or not isinstance(data.get("chords"), list):
        raise ValueError(f"Static chord table {source} must contain a 'chords' list")

    table: dict[str, list[str]] = {}
    for index, entry in enumerate(data["chords"]):
        if not isinstance(entry, dict):
            raise ValueError(f"{source}: entry {index} must be a mapping, got {entry!r}")
        intervals = entry.get("intervals")
        names = entry.get("names")
        if not isinstance(intervals, list) or not intervals:
            raise ValueError(f"{source}: entry {index} needs a non-empty 'intervals' list")
        if not isinstance(names, list) or not names:
            raise ValueError(f"{source}: entry {index} needs a non-empty 'names' list")

        # Stored intervals must already be canonical; IntervalVector validates
        vector = IntervalVector(tuple(intervals))
        spellings = table.setdefault(vector.key, [])
        for name in names:
            if not isinstance(name, str):
                raise ValueError(f"{source}: entry {index} has non-string name {name!r}")
            if name not in spellings:
                spellings.append(name)

    return MappingProxyType({key: tuple(v) for key, v in table.items()})


def load_static_table(path: Path | None = None) -> ChordMap:
    """Load and validate the curated static chord table.

    Args:
        path: YAML file to read. Defaults to STATIC_TABLE_PATH.

    Returns:
        Read-only interval-key → suffixes mapping.

    Raises:
        ValueError: If the file is missing or malformed.
    """
    table_path = path or STATIC_TABLE_PATH
    if not table_path.exists():
        raise ValueError(f"Static chord table not found: {table_path}")

    with table_path.open(encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    return _parse_static_entries(data, table_path)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordMapRepository:
    """Immutable bundle of the three chord tables.

    Attributes:
        static:              Curated table (highest priority)
        generated:           Compositional table without omissions
        generated_with_omit: Compositional table with omissions (lowest priority)
    """

    static: ChordMap
    generated: ChordMap
    generated_with_omit: ChordMap

    def table(self, source: str) -> ChordMap:
        """Return the table for a source name (see CHORD_SOURCES)."""
        if source == SOURCE_STATIC:
            return self.static
        if source == SOURCE_GENERATED:
            return self.generated
        if source == SOURCE_GENERATED_OMIT:
            return self.generated_with_omit
        raise ValueError(f"Unknown chord source {source!r}, valid: {CHORD_SOURCES}")

    def tables(self) -> tuple[tuple[str, ChordMap], ...]:
        """(source, table) pairs in lookup priority order."""
        return tuple((source, self.table(source)) for source in CHORD_SOURCES)

    def lookup(self, key: str | IntervalVector, source: str | None = None) -> tuple[str, ...]:
        """Return the suffixes registered for an interval vector.

        Args:
            key:    Interval vector or its comma-joined key, e.g. "0,4,7"
            source: Restrict to one table. None consults every table in
                    priority order and de-duplicates.

        Returns:
            Zero, one or many suffixes, preferred spelling first.
        """
        lookup_key = key.key if isinstance(key, IntervalVector) else key
        if source is not None:
            return self.table(source).get(lookup_key, ())

        found: list[str] = []
        for _source, table in self.tables():
            for name in table.get(lookup_key, ()):
                if name not in found:
                    found.append(name)
        return tuple(found)


def build_repository(static_path: Path | None = None) -> ChordMapRepository:
    """Load the static table and generate both compositional tables.

    The compositional names are enumerated once and indexed twice.
    """
    static = load_static_table(static_path)
    names = generate_chord_names()
    repository = ChordMapRepository(
        static=static,
        generated=generate_chord_map(include_omit=False, names=names),
        generated_with_omit=generate_chord_map(include_omit=True, names=names),
    )
    logger.debug(
        "Chord tables built: static=%d generated=%d generated_omit=%d shapes",
        len(repository.static),
        len(repository.generated),
        len(repository.generated_with_omit),
    )
    return repository


DEFAULT_REPOSITORY: ChordMapRepository = build_repository()
"""Process-wide repository, built eagerly at import and never mutated."""

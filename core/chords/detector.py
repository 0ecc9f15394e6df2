"""
core/chords/detector.py — detect_chord(), the chord recognition entry point.

detect_chord() is the main algorithm:
    1. Normalize the pitch set to bass-first note names
    2. Short-circuit tiny inputs:
         no pitches            → no chord
         one pitch class       → no chord
         two pitch classes     → "<root>5" for a perfect fifth, else no chord
    3. Search every chord table with every pass (see search.py)
    4. Group candidates by score and keep the best group (see scoring.py)
    5. Optionally merge tension parentheticals (see parentheses.py)

Design decisions:
    - Pure: no I/O, no randomness, no mutable state. The only shared data is
      the immutable ChordMapRepository built when repository.py is imported.
    - Never raises on musically empty or ambiguous input; "no chord" is an
      empty result, not an exception.
    - The pitch set is normalized before anything order-sensitive runs, so
      the result does not depend on the order pitches were supplied in.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.chords.notes import normalize_pitch_classes, to_interval_vector
from core.chords.parentheses import merge_parentheses
from core.chords.repository import DEFAULT_REPOSITORY, ChordMapRepository
from core.chords.scoring import select_best_group
from core.chords.search import find_candidates
from core.chords.types import (
    DEFAULT_OPTIONS,
    ChordList,
    DetectionOptions,
    DetectionResult,
    SingleChord,
)

POWER_CHORD_KEY = "0,7"
POWER_CHORD_SUFFIX = "5"


def _result(names: Iterable[str], options: DetectionOptions) -> DetectionResult:
    unique = tuple(dict.fromkeys(names))
    if options.return_all:
        return ChordList(names=unique)
    return SingleChord(name=unique[0] if unique else "")


def detect_chord_names(
    note_names: tuple[str, ...],
    *,
    merge: bool = True,
    repository: ChordMapRepository = DEFAULT_REPOSITORY,
) -> tuple[str, ...]:
    """Best-group chord names for already-normalized note names.

    Applies the one- and two-pitch-class short-circuits, so it is safe to
    call with any output of normalize_pitch_classes().
    """
    if len(note_names) <= 1:
        return ()
    if len(note_names) == 2:
        if to_interval_vector(note_names).key == POWER_CHORD_KEY:
            return (note_names[0] + POWER_CHORD_SUFFIX,)
        return ()

    best = select_best_group(find_candidates(note_names, repository))
    if merge:
        best = tuple(merge_parentheses(name) for name in best)
    return tuple(dict.fromkeys(best))


def detect_chord(
    pitches: Iterable[int],
    options: DetectionOptions = DEFAULT_OPTIONS,
    *,
    repository: ChordMapRepository = DEFAULT_REPOSITORY,
) -> DetectionResult:
    """Name the chord formed by a set of sounding pitches.

    Args:
        pitches:    MIDI note numbers; order and duplicates are irrelevant.
        options:    DetectionOptions (spelling, return_all, merge_parentheses).
        repository: Chord tables to consult. Defaults to the shared instance.

    Returns:
        SingleChord (return_all=False) whose name is "" when nothing
        matched, or ChordList (return_all=True) of every co-equal best name.

    Examples:
        >>> detect_chord({60, 64, 67})
        SingleChord(name='C', kind='single')
        >>> detect_chord({67, 72}).name
        ''
        >>> detect_chord({60, 64, 67, 70}, DetectionOptions(return_all=True)).names
        ('C7',)
    """
    distinct = frozenset(pitches)
    if not distinct:
        return _result((), options)

    note_names = normalize_pitch_classes(distinct, options.accidental_notation)
    names = detect_chord_names(
        note_names,
        merge=options.merge_parentheses,
        repository=repository,
    )
    return _result(names, options)

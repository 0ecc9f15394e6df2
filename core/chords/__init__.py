"""
core/chords/ — Pure chord recognition and notation engine.

Exports:
    Types:       DetectionOptions, DEFAULT_OPTIONS, SingleChord, ChordList,
                 DetectionResult, ChordCandidate, CandidateScore,
                 IntervalVector, TONIC_NOTES
    Detection:   detect_chord, detect_chord_names
    Notes:       normalize_pitch_classes, note_to_pitch_class,
                 pitch_class_to_note, midi_to_note_name
    Tables:      ChordMapRepository, DEFAULT_REPOSITORY, build_repository
    Search:      find_candidates
    Scoring:     score_candidate, group_candidates_by_score
    Notation:    merge_parentheses, chord_to_degree,
                 format_chord_name, format_chord_list
"""

from core.chords.degree import chord_to_degree
from core.chords.detector import detect_chord, detect_chord_names
from core.chords.formatter import format_chord_list, format_chord_name
from core.chords.notes import (
    midi_to_note_name,
    normalize_pitch_classes,
    note_to_pitch_class,
    pitch_class_to_note,
)
from core.chords.parentheses import merge_parentheses
from core.chords.repository import DEFAULT_REPOSITORY, ChordMapRepository, build_repository
from core.chords.scoring import group_candidates_by_score, score_candidate
from core.chords.search import find_candidates
from core.chords.types import (
    DEFAULT_OPTIONS,
    TONIC_NOTES,
    CandidateScore,
    ChordCandidate,
    ChordList,
    DetectionOptions,
    DetectionResult,
    IntervalVector,
    SingleChord,
)

__all__ = [
    # Types
    "DetectionOptions",
    "DEFAULT_OPTIONS",
    "SingleChord",
    "ChordList",
    "DetectionResult",
    "ChordCandidate",
    "CandidateScore",
    "IntervalVector",
    "TONIC_NOTES",
    # Detection
    "detect_chord",
    "detect_chord_names",
    # Notes
    "normalize_pitch_classes",
    "note_to_pitch_class",
    "pitch_class_to_note",
    "midi_to_note_name",
    # Tables
    "ChordMapRepository",
    "DEFAULT_REPOSITORY",
    "build_repository",
    # Search / scoring
    "find_candidates",
    "score_candidate",
    "group_candidates_by_score",
    # Notation
    "merge_parentheses",
    "chord_to_degree",
    "format_chord_name",
    "format_chord_list",
]

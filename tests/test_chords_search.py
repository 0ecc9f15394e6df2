"""
Tests for core/chords/search.py — candidate search over the chord tables.

Validates:
    - slash_chord / rotations / lookup_names helpers
    - find_candidates: direct, rotation and bass-removed passes, source and
      pass bookkeeping, de-duplication, empty input
"""

from __future__ import annotations

import logging

from core.chords.search import find_candidates, lookup_names, rotations, slash_chord


def _by_name(note_names):
    return {c.name: c for c in find_candidates(note_names)}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_slash_chord_uppercases_bass(self):
        assert slash_chord("Dm9", "c") == "Dm9/C"

    def test_slash_chord_keeps_accidental(self):
        assert slash_chord("C", "F♯") == "C/F♯"

    def test_rotations(self):
        assert list(rotations(("C", "E", "G"))) == [("E", "G", "C"), ("G", "C", "E")]

    def test_rotations_of_single_note(self):
        assert list(rotations(("C",))) == []

    def test_lookup_names_prefixes_root(self, repository):
        names = lookup_names(("C", "E", "G", "B"), repository.static)
        assert names == ("CM7", "Cmaj7", "C△7")

    def test_lookup_names_empty(self, repository):
        assert lookup_names((), repository.generated) == ()


# ---------------------------------------------------------------------------
# find_candidates
# ---------------------------------------------------------------------------


class TestFindCandidates:
    def test_empty_input(self):
        assert find_candidates(()) == ()

    def test_first_inversion(self):
        names = [c.name for c in find_candidates(("E", "G", "C"))]
        assert names[:2] == ["Em(♯5)", "C/E"]

    def test_rotation_candidate_bookkeeping(self):
        candidate = _by_name(("E", "G", "C"))["C/E"]
        assert candidate.source == "generated"
        assert candidate.search_pass == "rotation"
        assert candidate.is_slash

    def test_direct_candidate_bookkeeping(self):
        candidate = _by_name(("C", "E", "G"))["C"]
        assert candidate.search_pass == "direct"
        assert not candidate.is_slash

    def test_static_candidates_come_first(self):
        candidates = find_candidates(("C", "E♭", "G♭", "B♭"))
        assert candidates[0].name == "Cm7(♭5)"
        assert candidates[0].source == "static"
        assert candidates[1].name == "Cø7"

    def test_bass_removed_pass(self):
        candidate = _by_name(("F♯", "G", "C", "E"))["C/F♯"]
        assert candidate.search_pass == "bass_removed"

    def test_rotation_over_chord_tone_bass(self):
        assert _by_name(("C", "D", "F♯", "A"))["D7/C"].search_pass == "rotation"

    def test_names_are_unique(self):
        names = [c.name for c in find_candidates(("C", "E", "G", "B", "D"))]
        assert len(names) == len(set(names))

    def test_omission_spellings_present(self):
        names = _by_name(("C", "E", "B♭"))
        assert names["C7(omit5)"].source == "generated_omit"

    def test_unknown_note_does_not_raise(self, caplog):
        with caplog.at_level(logging.WARNING):
            candidates = find_candidates(("C", "X", "G"))
        assert isinstance(candidates, tuple)
        assert "Unknown note name" in caplog.text

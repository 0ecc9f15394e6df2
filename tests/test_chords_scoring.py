"""
Tests for core/chords/scoring.py — candidate scoring and grouping.

Validates:
    - parse_chord_name: the pieces the scorer reads
    - score_candidate: suffix complexity, bass cost, omissions, static names,
      raised thirteenth, slash surcharge
    - group_candidates_by_score: ordering, tie grouping, search order kept
    - Competing spellings of one shape, omission vs slash readings
    - select_best_group: winner and empty input
"""

from __future__ import annotations

import pytest

from core.chords.names import ChordNameParts, parse_chord_name
from core.chords.scoring import group_candidates_by_score, score_candidate, select_best_group
from core.chords.types import CandidateScore, ChordCandidate

# ---------------------------------------------------------------------------
# parse_chord_name
# ---------------------------------------------------------------------------


class TestParseChordName:
    def test_full_name(self):
        assert parse_chord_name("Dm7(9)(omit5)/C") == ChordNameParts(
            root="D", quality="m7", tensions=("9", "omit5"), bass="C"
        )

    def test_accidental_root_without_bass(self):
        parts = parse_chord_name("F♯7sus4")
        assert (parts.root, parts.quality, parts.bass) == ("F♯", "7sus4", "")

    def test_roman_numeral_root_is_not_parsed(self):
        parts = parse_chord_name("IVm7")
        assert parts.root == ""
        assert parts.quality == "IVm7"


# ---------------------------------------------------------------------------
# score_candidate
# ---------------------------------------------------------------------------


class TestScoreCandidate:
    @pytest.mark.parametrize(
        "name, source, search_pass, expected",
        [
            ("C", "generated", "direct", (0, 0)),
            ("C7", "generated", "direct", (0, 0)),
            ("Cm9", "generated", "direct", (0, 0)),
            ("Csus4", "generated", "direct", (1, 0)),
            ("C7(9)", "generated", "direct", (1, 0)),
            ("C7(13)", "generated", "direct", (1, 0)),
            ("C6(♯13)", "generated", "direct", (2, 0)),
            ("C(9)(♯13)", "generated", "direct", (3, 0)),
            ("Em(♯5)", "generated", "direct", (2, 0)),
            ("C/E", "generated", "rotation", (1, 0)),
            ("Fsus2/C", "generated", "rotation", (3, 0)),
            ("Am(♭9)/C", "generated", "rotation", (3, 0)),
            ("C/D", "generated", "bass_removed", (3, 0)),
            ("Cm7(♭5)", "static", "direct", (0, 0)),
            ("Cm7(♭5)", "generated", "direct", (2, 0)),
            ("Cdim7/E♭", "static", "rotation", (1, 0)),
            ("A♯dim/C", "static", "bass_removed", (3, 0)),
            ("C7(omit5)", "generated_omit", "direct", (1, 1)),
            ("C7(omit3)", "generated_omit", "direct", (3, 1)),
            ("C7(♭9)(omit5)", "generated_omit", "direct", (2, 1)),
            ("C(9)(omit3)(omit5)", "generated_omit", "direct", (5, 2)),
        ],
    )
    def test_scores(self, name, source, search_pass, expected):
        candidate = ChordCandidate(name, source=source, search_pass=search_pass)
        assert score_candidate(candidate) == CandidateScore(*expected)

    def test_ascii_raised_thirteenth_costs_the_same(self):
        glyph = score_candidate(ChordCandidate("C6(♯13)"))
        ascii_ = score_candidate(ChordCandidate("C6(#13)"))
        assert glyph == ascii_

    def test_omit3_costs_more_than_omit5(self):
        omit3 = score_candidate(ChordCandidate("C7(omit3)", source="generated_omit"))
        omit5 = score_candidate(ChordCandidate("C7(omit5)", source="generated_omit"))
        assert omit5 < omit3


# ---------------------------------------------------------------------------
# group_candidates_by_score / select_best_group
# ---------------------------------------------------------------------------


class TestGrouping:
    def test_inversion_beats_altered_fifth(self):
        candidates = [
            ChordCandidate("Em(♯5)"),
            ChordCandidate("C/E", search_pass="rotation"),
        ]
        assert group_candidates_by_score(candidates) == [("C/E",), ("Em(♯5)",)]

    def test_equal_scores_share_a_group_in_search_order(self):
        candidates = [
            ChordCandidate("CM7", source="static"),
            ChordCandidate("Cmaj7", source="static"),
            ChordCandidate("CM7(♯13)"),
        ]
        assert select_best_group(candidates) == ("CM7", "Cmaj7")

    def test_omissions_break_penalty_ties(self):
        candidates = [
            ChordCandidate("C7(omit5)", source="generated_omit"),
            ChordCandidate("C/E", search_pass="rotation"),
        ]
        assert group_candidates_by_score(candidates) == [("C/E",), ("C7(omit5)",)]

    def test_static_suffix_beats_generated_inversion(self):
        candidates = [
            ChordCandidate("Cm7(♭5)", source="static"),
            ChordCandidate("D♯m6/C", search_pass="rotation"),
        ]
        assert select_best_group(candidates) == ("Cm7(♭5)",)

    def test_empty(self):
        assert group_candidates_by_score([]) == []
        assert select_best_group([]) == ()


class TestCompetingSpellings:
    def test_seventh_with_thirteenth_beats_sixth_with_raised_thirteenth(self):
        # Generator order puts the sixth spelling first
        candidates = [ChordCandidate("C6(♯13)"), ChordCandidate("C7(13)")]
        assert group_candidates_by_score(candidates) == [("C7(13)",), ("C6(♯13)",)]

    def test_dominant_without_fifth_beats_added_bass_diminished(self):
        candidates = [
            ChordCandidate("A♯dim/C", source="static", search_pass="bass_removed"),
            ChordCandidate("C7(♭9)(omit5)", source="generated_omit"),
        ]
        assert select_best_group(candidates) == ("C7(♭9)(omit5)",)

    def test_dominant_without_fifth_beats_decorated_inversion(self):
        candidates = [
            ChordCandidate("Am(♭9)/C", search_pass="rotation"),
            ChordCandidate("C7(13)(omit5)", source="generated_omit"),
        ]
        assert select_best_group(candidates) == ("C7(13)(omit5)",)

    def test_ninth_without_fifth_beats_suspended_slash(self):
        candidates = [
            ChordCandidate("D7sus2(♭13)/C", search_pass="rotation"),
            ChordCandidate("C9(13)(omit5)", source="generated_omit"),
        ]
        assert select_best_group(candidates) == ("C9(13)(omit5)",)

    def test_plain_inversion_still_beats_omission(self):
        candidates = [
            ChordCandidate("Em(♭13)(omit5)", source="generated_omit"),
            ChordCandidate("C/E", search_pass="rotation"),
        ]
        assert select_best_group(candidates) == ("C/E",)

"""
core/chords/scoring.py — Candidate scoring and best-group selection.

Scoring policy (lower penalty = more preferable):

    suffix complexity   0 for curated static names, otherwise
                          +1 per tension parenthetical, e.g. "(9)"
                          +2 per "(♯13)", which sounds the minor seventh
                          +2 per altered fifth, "(♭5)" / "(♯5)"
                          +1 for a suspended third, "sus2" / "sus4"
                        doubled when the name is a slash chord
    bass cost           0 root position
                        1 inversion (bass is a chord tone, rotation pass)
                        3 added bass (bass-removed pass)
    omissions           +1 per "(omit5)", +3 per "(omit3)"

Candidates sharing a CandidateScore(penalty, omissions) form one group;
groups sort by penalty, then by omission count. Inside a group the search
order is kept, which already reflects table priority.

Examples of the policy at work:
    E-G-C         "C/E" (1) beats "Em(♯5)" (2)
    C-F-G         "Csus4" (1) beats "Fsus2/C" (3)
    C-E♭-G♭-B♭    "Cm7(♭5)" (static, 0) beats "D♯m6/C" (1)
    C-E-G-A       "C6" (0) beats "Am7/C" (1)
    C-E-G-A-B♭    "C7(13)" (1) beats "C6(♯13)" (2)
    C-E-B♭-D♭     "C7(♭9)(omit5)" (2) beats "A♯dim/C" (3)
    C-E-A-B♭      "C7(13)(omit5)" (2) beats "Am(♭9)/C" (3)
"""

from __future__ import annotations

from collections.abc import Iterable

from core.chords.names import parse_chord_name
from core.chords.parentheses import classify_tension
from core.chords.types import (
    PASS_BASS_REMOVED,
    PASS_ROTATION,
    SOURCE_STATIC,
    CandidateScore,
    ChordCandidate,
)

TENSION_COST = 1
ENHARMONIC_SEVENTH_COST = 2
ALTERED_FIFTH_COST = 2
SUS_COST = 1
SLASH_COMPLEXITY_FACTOR = 2

OMISSION_COST: dict[str, int] = {
    "omit3": 3,
    "omit5": 1,
}

BASS_COST: dict[str, int] = {
    PASS_ROTATION: 1,
    PASS_BASS_REMOVED: 3,
}

# Raised thirteenth spellings: same pitch class as the minor seventh
_ENHARMONIC_SEVENTH_TOKENS = frozenset({"♯13", "#13", "+13"})


def _suffix_complexity(quality: str, tensions: tuple[str, ...]) -> tuple[int, int, int]:
    """Return (complexity, omission cost, omission count) for a suffix's parsed pieces."""
    complexity = SUS_COST if "sus" in quality else 0
    omission_cost = 0
    omissions = 0
    for token in tensions:
        kind = classify_tension(token)
        if kind in OMISSION_COST:
            omission_cost += OMISSION_COST[kind]
            omissions += 1
        elif kind == "altered_fifth":
            complexity += ALTERED_FIFTH_COST
        elif token.strip() in _ENHARMONIC_SEVENTH_TOKENS:
            complexity += ENHARMONIC_SEVENTH_COST
        else:
            complexity += TENSION_COST
    return complexity, omission_cost, omissions


def score_candidate(candidate: ChordCandidate) -> CandidateScore:
    """Compute the score-equivalence key of one candidate.

    Examples:
        >>> score_candidate(ChordCandidate("C7"))
        CandidateScore(penalty=0, omissions=0)
        >>> score_candidate(ChordCandidate("C7(omit5)", source="generated_omit"))
        CandidateScore(penalty=1, omissions=1)
        >>> score_candidate(ChordCandidate("Fsus2/C", search_pass="rotation"))
        CandidateScore(penalty=3, omissions=0)
    """
    parts = parse_chord_name(candidate.name)
    complexity, omission_cost, omissions = _suffix_complexity(parts.quality, parts.tensions)
    if candidate.source == SOURCE_STATIC:
        complexity = 0
    if candidate.is_slash:
        complexity *= SLASH_COMPLEXITY_FACTOR
    bass_cost = BASS_COST.get(candidate.search_pass, 0)
    penalty = complexity + bass_cost + omission_cost
    return CandidateScore(penalty=penalty, omissions=omissions)


def group_candidates_by_score(
    candidates: Iterable[ChordCandidate],
) -> list[tuple[str, ...]]:
    """Group candidate names by score, best group first.

    Args:
        candidates: Output of find_candidates(), in search order.

    Returns:
        List of name tuples. Element 0 is the winning group; names inside a
        group keep search order. Empty when there are no candidates.
    """
    groups: dict[CandidateScore, list[str]] = {}
    for candidate in candidates:
        groups.setdefault(score_candidate(candidate), []).append(candidate.name)
    return [tuple(groups[score]) for score in sorted(groups)]


def select_best_group(candidates: Iterable[ChordCandidate]) -> tuple[str, ...]:
    """Return the winning group of names, or () when there are no candidates."""
    groups = group_candidates_by_score(candidates)
    return groups[0] if groups else ()

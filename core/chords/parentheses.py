"""
core/chords/parentheses.py — Merge tension parentheticals into one group.

    merge_parentheses("C(9)(13)")          → "C(9, 13)"
    merge_parentheses("Dm7(11)(9)/C")      → "Dm7(9, 11)/C"
    merge_parentheses("C7(omit5)(♭9)")     → "C7(♭9, omit5)"

Tokens sort by a fixed precedence:

    altered fifth  (♭5 ♯5)
    9 family       (♭9 9 ♯9)
    11
    13 family      (♭13 13 ♯13)
    ♯11
    omit3
    omit5
    anything else  (stable, after all of the above)

Accidentals are recognised in glyph (♭ ♯), ASCII (b #) and sign (- +) form.
"""

from __future__ import annotations

import re

from core.chords.names import extract_parentheticals, split_bass, strip_parentheticals

_TOKEN_RE = re.compile(r"^(?P<accidental>[♭♯b#+-]?)(?P<degree>\d+)$")

_SHARPS = frozenset({"♯", "#", "+"})

# Tension kind → sort precedence
TENSION_ORDER: dict[str, int] = {
    "altered_fifth": 0,
    "ninth": 1,
    "eleventh": 2,
    "thirteenth": 3,
    "sharp_eleventh": 4,
    "omit3": 5,
    "omit5": 6,
}
_UNKNOWN_ORDER = len(TENSION_ORDER)


def classify_tension(token: str) -> str | None:
    """Name the family of a parenthetical token, or None when unrecognised.

    Examples:
        >>> classify_tension("♭5")
        'altered_fifth'
        >>> classify_tension("+11")
        'sharp_eleventh'
        >>> classify_tension("add2") is None
        True
    """
    token = token.strip()
    if token in ("omit3", "omit5"):
        return token

    match = _TOKEN_RE.match(token)
    if not match:
        return None
    accidental = match.group("accidental")
    degree = match.group("degree")

    if degree == "5":
        return "altered_fifth" if accidental else None
    if degree == "9":
        return "ninth"
    if degree == "11":
        if accidental in _SHARPS:
            return "sharp_eleventh"
        return "eleventh" if not accidental else None
    if degree == "13":
        return "thirteenth"
    return None


def _sort_key(token: str) -> int:
    kind = classify_tension(token)
    return TENSION_ORDER[kind] if kind is not None else _UNKNOWN_ORDER


def merge_parentheses(chord_name: str) -> str:
    """Collapse every parenthetical before the slash bass into one group.

    Already-merged groups are split on commas first, so merging is
    idempotent. Names without parentheticals are returned unchanged.
    """
    chord_part, bass_part = split_bass(chord_name)

    tokens = [
        token.strip()
        for group in extract_parentheticals(chord_part)
        for token in group.split(",")
        if token.strip()
    ]
    if not tokens:
        return chord_name

    ordered = sorted(tokens, key=_sort_key)  # stable: unknown tokens keep their order
    return f"{strip_parentheticals(chord_part)}({', '.join(ordered)}){bass_part}"

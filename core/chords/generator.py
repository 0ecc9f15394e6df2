"""
core/chords/generator.py — Compositional chord-table generator.

generate_chord_map() builds every chord name reachable by stacking one
choice from each axis on top of the root:

    third    (omit3) sus2 m <major> sus4
    seventh  <none> 6 7 M7
    fifth    (omit5) (♭5) <perfect> (♯5)
    tensions (♭9) (9) (♯9) (11) (♯11) (♭13) (13) (♯13) — each optional

Algorithm:
    1. root × third × seventh (pairwise product, overlapping intervals dropped)
    2. move "susN" to the end of the name          7sus4, not sus47
    3. × fifth
    4. × each tension axis in turn, applying its rewrite rules
    5. move "(omitN)" to the end of the name       m7(9)(omit5)
    6. index by interval-vector key, absorbing redundant (9)/(11)/(13)

Rewrite rules keep both spellings: adding (9) to "7" also yields "9",
adding (11) to a bare "9" also yields "11", adding (13) to a bare "11" also
yields "13". After absorption "9(9)" additionally yields "9".

Pure and deterministic — the same input always yields the same table, in
the same insertion order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Axis definitions
# ---------------------------------------------------------------------------

ChordMap = Mapping[str, tuple[str, ...]]


@dataclass(frozen=True)
class Rewrite:
    """Replace the first match of pattern in a name, as an extra spelling."""

    pattern: re.Pattern[str]
    replacement: str

    def apply(self, name: str) -> str | None:
        rewritten = self.pattern.sub(self.replacement, name, count=1)
        return rewritten if rewritten != name else None


@dataclass(frozen=True)
class AxisChoice:
    """One option on a choice axis: the intervals it adds and its name fragment."""

    intervals: tuple[int, ...]
    fragment: str
    rewrites: tuple[Rewrite, ...] = field(default=())


# A bare number is one not immediately closed by ")": "9" in "m9", not in "(9)"
_BARE_9 = re.compile(r"9(?!\))")
_BARE_11 = re.compile(r"11(?!\))")
_BARE_13 = re.compile(r"13(?!\))")

ROOT_AXIS: tuple[AxisChoice, ...] = (AxisChoice((0,), ""),)

THIRD_AXIS: tuple[AxisChoice, ...] = (
    AxisChoice((), "(omit3)"),
    AxisChoice((2,), "sus2"),
    AxisChoice((3,), "m"),
    AxisChoice((4,), ""),
    AxisChoice((5,), "sus4"),
)

FIFTH_AXIS: tuple[AxisChoice, ...] = (
    AxisChoice((), "(omit5)"),
    AxisChoice((6,), "(♭5)"),
    AxisChoice((7,), ""),
    AxisChoice((8,), "(♯5)"),
)

SEVENTH_AXIS: tuple[AxisChoice, ...] = (
    AxisChoice((), ""),
    AxisChoice((9,), "6"),
    AxisChoice((10,), "7"),
    AxisChoice((11,), "M7"),
)

TENSION_AXES: tuple[AxisChoice, ...] = (
    AxisChoice((1,), "(♭9)"),
    AxisChoice((2,), "(9)", (Rewrite(re.compile(r"7"), "9"),)),
    AxisChoice((3,), "(♯9)"),
    AxisChoice((5,), "(11)", (Rewrite(_BARE_9, "11"),)),
    AxisChoice((6,), "(♯11)"),
    AxisChoice((8,), "(♭13)"),
    AxisChoice((9,), "(13)", (Rewrite(_BARE_11, "13"),)),
    AxisChoice((10,), "(♯13)"),
)

_SUS_RE = re.compile(r"sus\d")
_OMIT_RE = re.compile(r"\(omit\d\)")

# Partial chord: (sorted intervals, name)
_Partial = tuple[tuple[int, ...], str]

# ---------------------------------------------------------------------------
# Combination helpers
# ---------------------------------------------------------------------------


def combine_intervals(
    first: Iterable[int], second: Iterable[int]
) -> tuple[int, ...] | None:
    """Union two interval sets, or None when they share a pitch class."""
    a = tuple(first)
    b = tuple(second)
    merged = set(a) | set(b)
    if len(merged) != len(a) + len(b):
        return None
    return tuple(sorted(merged))


def _product(partials: list[_Partial], axis: Iterable[AxisChoice]) -> list[_Partial]:
    """Pairwise product of partial chords with an axis, dropping overlaps."""
    result: list[_Partial] = []
    choices = tuple(axis)
    for intervals, name in partials:
        for choice in choices:
            combined = combine_intervals(intervals, choice.intervals)
            if combined is None:
                continue
            new_name = name + choice.fragment
            result.append((combined, new_name))
            for rewrite in choice.rewrites:
                rewritten = rewrite.apply(new_name)
                if rewritten is not None:
                    result.append((combined, rewritten))
    return result


def move_to_tail(name: str, pattern: re.Pattern[str]) -> str:
    """Move every match of pattern to the end of name, keeping their order."""
    matches = pattern.findall(name)
    if not matches:
        return name
    return pattern.sub("", name) + "".join(matches)


def absorb_implied_tensions(name: str) -> str:
    """Drop parenthetical tensions implied by a bare 13 / 11 / 9.

    Examples:
        >>> absorb_implied_tensions("13(9)(11)")
        '13'
        >>> absorb_implied_tensions("m9(9)(♭13)")
        'm9(♭13)'
    """
    if _BARE_13.search(name):
        redundant: tuple[str, ...] = ("(9)", "(11)", "(13)")
    elif _BARE_11.search(name):
        redundant = ("(9)", "(11)")
    elif _BARE_9.search(name):
        redundant = ("(9)",)
    else:
        return name
    for token in redundant:
        name = name.replace(token, "")
    return name


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_chord_names() -> list[_Partial]:
    """Enumerate (intervals, suffix) for every compositional chord, in build order."""
    partials: list[_Partial] = [(c.intervals, c.fragment) for c in ROOT_AXIS]
    partials = _product(partials, THIRD_AXIS)
    partials = _product(partials, SEVENTH_AXIS)
    partials = [(i, move_to_tail(n, _SUS_RE)) for i, n in partials]
    partials = _product(partials, FIFTH_AXIS)
    for tension in TENSION_AXES:
        partials = _product(partials, (AxisChoice((), ""), tension))
    return [(i, move_to_tail(n, _OMIT_RE)) for i, n in partials]


def generate_chord_map(
    include_omit: bool = False,
    names: Iterable[_Partial] | None = None,
) -> ChordMap:
    """Build the interval-key → suffixes table.

    Args:
        include_omit: Keep names containing an "(omitN)" marker.
        names:        Pre-computed output of generate_chord_names(), so both
                      tables can be indexed from a single enumeration.

    Returns:
        Read-only mapping of keys like "0,4,7,10" to suffix tuples like
        ("7",). A shape reached several ways keeps every spelling in
        build order, without duplicates.
    """
    table: dict[str, list[str]] = {}
    partials = names if names is not None else generate_chord_names()
    for intervals, name in partials:
        if not include_omit and "omit" in name:
            continue
        key = ",".join(str(i) for i in intervals)
        spellings = table.setdefault(key, [])
        for spelling in (name, absorb_implied_tensions(name)):
            if spelling not in spellings:
                spellings.append(spelling)
    return MappingProxyType({key: tuple(v) for key, v in table.items()})

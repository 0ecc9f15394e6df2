"""
core/chords/names.py — Chord-name grammar.

A chord name is read as:

    name     := root body ["/" bass]
    root     := letter [accidental] | [accidental] numeral
    letter   := "A" … "G"
    numeral  := roman "I" … "VII"
    body     := quality { "(" tension ")" }  (parentheticals may sit anywhere)

parse_chord_name() splits a letter-rooted name into these pieces for the
scorer. The merger, formatter and degree converter share the same root,
parenthetical and slash helpers instead of scanning strings on their own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Accidentals accepted after a letter root. ASCII "b" is safe here because no
# chord quality starts with a lower-case b.
_LETTER_ROOT = r"[A-G][♯♭#b]?"
_DEGREE_ROOT = r"[♯♭#b]?(?:VII|VI|V|IV|III|II|I)"

LETTER_ROOT_RE = re.compile(rf"^(?P<root>{_LETTER_ROOT})")
ROOT_RE = re.compile(rf"^(?P<root>{_DEGREE_ROOT}|{_LETTER_ROOT})")
PARENTHETICAL_RE = re.compile(r"\(([^)]+)\)")


@dataclass(frozen=True)
class ChordNameParts:
    """A chord name split along its grammar.

    Attributes:
        root:      Root token, e.g. "C♯", "B♭" ("" when unparseable)
        quality:   Body with parentheticals removed, e.g. "m7", "9sus4"
        tensions:  Parenthetical contents in order, e.g. ("9", "omit5")
        bass:      Token after "/", e.g. "E" ("" when not a slash chord)
    """

    root: str
    quality: str
    tensions: tuple[str, ...]
    bass: str


def split_bass(name: str) -> tuple[str, str]:
    """Split at the first "/" → (chord part, "/bass" suffix or "")."""
    index = name.find("/")
    if index == -1:
        return name, ""
    return name[:index], name[index:]


def extract_parentheticals(text: str) -> tuple[str, ...]:
    """Return the contents of every "(…)" group in text, in order."""
    return tuple(PARENTHETICAL_RE.findall(text))


def strip_parentheticals(text: str) -> str:
    return PARENTHETICAL_RE.sub("", text)


def parse_chord_name(name: str) -> ChordNameParts:
    """Split a chord name into root, quality, tensions and bass.

    Args:
        name: Chord name with a letter root, e.g. "C♯m7(9)/G♯"

    Returns:
        ChordNameParts. An unparseable root yields root="" and the whole
        chord part as quality.

    Examples:
        >>> parse_chord_name("Dm7(9)(omit5)/C")
        ChordNameParts(root='D', quality='m7', tensions=('9', 'omit5'), bass='C')
    """
    chord_part, bass_part = split_bass(name)
    match = LETTER_ROOT_RE.match(chord_part)
    root = match.group("root") if match else ""
    body = chord_part[len(root) :]
    return ChordNameParts(
        root=root,
        quality=strip_parentheticals(body),
        tensions=extract_parentheticals(body),
        bass=bass_part[1:],
    )

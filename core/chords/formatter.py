"""
core/chords/formatter.py — Chord names → display markup.

    format_chord_name("CM7")       → 'C<span class="quality">M7</span>'
    format_chord_name("♭IIm7")     → '<sup class="flat">♭</sup>II<span class="quality">m7</span>'
    format_chord_name("C♯m7(9)")   → 'C<sup class="sharp">♯</sup><span class="quality">m7<sup>(9)</sup></span>'

Pure string transform with no music theory in it: works on absolute names
and on degree names alike. Text is HTML-escaped before decoration.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from core.chords.names import ROOT_RE

_ACCIDENTAL_MARKUP: dict[str, str] = {
    "♭": '<sup class="flat">♭</sup>',
    "♯": '<sup class="sharp">♯</sup>',
}
_ACCIDENTAL_RE = re.compile("[♭♯]")
_BRACKET_RE = re.compile(r"\([^)]+\)")

LIST_SEPARATOR = ", "


@dataclass(frozen=True)
class ChordParts:
    root: str
    quality: str


def extract_chord_parts(chord_name: str) -> ChordParts:
    """Split a name into root and quality.

    The root is a letter A–G with at most one accidental, or a roman
    numeral degree with an optional leading accidental. A name with no
    recognisable root is returned whole as root.
    """
    if not chord_name:
        return ChordParts(root="", quality="")
    match = ROOT_RE.match(chord_name)
    if not match:
        return ChordParts(root=chord_name, quality="")
    root = match.group("root")
    return ChordParts(root=root, quality=chord_name[len(root) :])


def format_accidentals(text: str) -> str:
    """Wrap each ♭ / ♯ glyph in its own superscript element."""
    return _ACCIDENTAL_RE.sub(lambda m: _ACCIDENTAL_MARKUP[m.group(0)], text)


def format_brackets(text: str) -> str:
    """Wrap each parenthetical group, e.g. "(9)", in a superscript element."""
    return _BRACKET_RE.sub(lambda m: f"<sup>{m.group(0)}</sup>", text)


def format_chord_name(chord_name: str) -> str:
    """Render one chord name as markup. Empty input yields ""."""
    if not chord_name:
        return ""
    parts = extract_chord_parts(chord_name)
    root = format_accidentals(html.escape(parts.root, quote=False))
    quality = format_brackets(format_accidentals(html.escape(parts.quality, quote=False)))
    if not quality:
        return root
    return f'{root}<span class="quality">{quality}</span>'


def format_chord_list(chord_names: str) -> str:
    """Render a ", "-joined list of names, keeping the separator."""
    if not chord_names:
        return ""
    return LIST_SEPARATOR.join(
        format_chord_name(name.strip()) for name in chord_names.split(LIST_SEPARATOR)
    )

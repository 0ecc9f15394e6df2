"""
Tests for core/chords/formatter.py — display markup for chord names.

Validates:
    - extract_chord_parts: letter roots, degree roots, unparseable names
    - format_chord_name: accidental and bracket superscripts, escaping
    - format_chord_list: separator preserved
"""

from __future__ import annotations

import pytest

from core.chords.formatter import (
    ChordParts,
    extract_chord_parts,
    format_accidentals,
    format_brackets,
    format_chord_list,
    format_chord_name,
)

FLAT = '<sup class="flat">♭</sup>'
SHARP = '<sup class="sharp">♯</sup>'


class TestExtractChordParts:
    @pytest.mark.parametrize(
        "name, root, quality",
        [
            ("CM7", "C", "M7"),
            ("B♭m7", "B♭", "m7"),
            ("Bbm7", "Bb", "m7"),
            ("F♯", "F♯", ""),
            ("IVM7", "IV", "M7"),
            ("♭VIIm7(♭5)", "♭VII", "m7(♭5)"),
            ("VI", "VI", ""),
            ("N.C.", "N.C.", ""),
            ("", "", ""),
        ],
    )
    def test_parts(self, name, root, quality):
        assert extract_chord_parts(name) == ChordParts(root=root, quality=quality)


class TestFormatHelpers:
    def test_format_accidentals(self):
        assert format_accidentals("♭9♯11") == f"{FLAT}9{SHARP}11"

    def test_format_brackets(self):
        assert format_brackets("m7(9)(13)") == "m7<sup>(9)</sup><sup>(13)</sup>"


class TestFormatChordName:
    def test_plain_quality(self):
        assert format_chord_name("CM7") == 'C<span class="quality">M7</span>'

    def test_root_only(self):
        assert format_chord_name("C") == "C"

    def test_degree_root_with_flat(self):
        assert format_chord_name("♭IIm7") == f'{FLAT}II<span class="quality">m7</span>'

    def test_sharp_root_and_tension(self):
        assert (
            format_chord_name("C♯m7(9)")
            == f'C{SHARP}<span class="quality">m7<sup>(9)</sup></span>'
        )

    def test_slash_bass_stays_in_quality(self):
        assert format_chord_name("C/E") == 'C<span class="quality">/E</span>'

    def test_html_is_escaped(self):
        assert format_chord_name("C<b>") == 'C<span class="quality">&lt;b&gt;</span>'

    def test_empty(self):
        assert format_chord_name("") == ""


class TestFormatChordList:
    def test_list_keeps_separator(self):
        assert format_chord_list("CM7, Cmaj7") == (
            'C<span class="quality">M7</span>, C<span class="quality">maj7</span>'
        )

    def test_single_name(self):
        assert format_chord_list("Am") == 'A<span class="quality">m</span>'

    def test_empty(self):
        assert format_chord_list("") == ""

"""
core/chords/degree.py — Absolute chord names → roman-numeral degree names.

    chord_to_degree("Dm7", "C", "major")      → "IIm7"
    chord_to_degree("E♭M7", "C", "major")     → "♭IIIM7"
    chord_to_degree("C♯m7/G♯", "C", "major")  → "♯Im7/♯V"
    chord_to_degree("Fm", "C", "minor")       → "IVm"

Each of the root and the slash bass is converted on its own:
    1. semitone offset above the tonic, (note - tonic) mod 12
    2. on the mode's seven-step ladder → plain numeral
    3. off the ladder → neighbouring step plus an accidental, spelled the way
       the token was: a sharp token prefers ♯ on the step below, anything
       else prefers ♭ on the step above

An unresolvable token or a missing tonic yields None.
"""

from __future__ import annotations

from core.chords.names import LETTER_ROOT_RE, split_bass
from core.chords.notes import SEMITONES_PER_OCTAVE, note_to_pitch_class
from core.chords.types import VALID_KEY_MODES

DEGREE_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Semitone offset of each ladder step above the tonic
DEGREE_LADDERS: dict[str, tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11),
    "minor": (0, 2, 3, 5, 7, 8, 10),
}

_SHARP_GLYPHS = ("♯", "#")


def _is_sharp_spelling(token: str) -> bool:
    return any(glyph in token for glyph in _SHARP_GLYPHS)


def offset_to_numeral(offset: int, key_mode: str = "major", prefer_sharp: bool = False) -> str | None:
    """Express a semitone offset above the tonic as a degree numeral.

    Examples:
        >>> offset_to_numeral(1)
        '♭II'
        >>> offset_to_numeral(1, prefer_sharp=True)
        '♯I'
    """
    ladder = DEGREE_LADDERS[key_mode]
    offset %= SEMITONES_PER_OCTAVE
    if offset in ladder:
        return DEGREE_NUMERALS[ladder.index(offset)]

    sharp_step = (offset - 1) % SEMITONES_PER_OCTAVE
    flat_step = (offset + 1) % SEMITONES_PER_OCTAVE
    options = [("♯", sharp_step), ("♭", flat_step)]
    if not prefer_sharp:
        options.reverse()
    for accidental, step in options:
        if step in ladder:
            return accidental + DEGREE_NUMERALS[ladder.index(step)]
    return None


def note_to_degree(note: str, tonic: str, key_mode: str = "major") -> str | None:
    """Degree numeral of a single note relative to tonic, or None if unknown."""
    semitone = note_to_pitch_class(note)
    tonic_semitone = note_to_pitch_class(tonic)
    if semitone is None or tonic_semitone is None:
        return None
    return offset_to_numeral(semitone - tonic_semitone, key_mode, _is_sharp_spelling(note))


def chord_to_degree(chord_name: str, tonic: str | None, key_mode: str = "major") -> str | None:
    """Convert a chord name into degree notation for a key.

    Args:
        chord_name: Absolute chord name, e.g. "Dm7", "C♯M7/G♯"
        tonic:      Tonic spelling, e.g. "C", "E♭" (see TONIC_NOTES), or None
        key_mode:   "major" or "minor"

    Returns:
        Degree name such as "IIm7", or None when no tonic is given or the
        root or bass does not resolve to a pitch class.

    Raises:
        ValueError: If key_mode is not "major" or "minor".
    """
    if key_mode not in VALID_KEY_MODES:
        raise ValueError(f"Unknown key_mode {key_mode!r}, valid: {sorted(VALID_KEY_MODES)}")
    if not tonic:
        return None

    chord_part, bass_part = split_bass(chord_name)
    match = LETTER_ROOT_RE.match(chord_part)
    if not match:
        return None
    root = match.group("root")
    quality = chord_part[len(root) :]

    root_degree = note_to_degree(root, tonic, key_mode)
    if root_degree is None:
        return None
    if not bass_part:
        return root_degree + quality

    bass_degree = note_to_degree(bass_part[1:], tonic, key_mode)
    if bass_degree is None:
        return None
    return f"{root_degree}{quality}/{bass_degree}"

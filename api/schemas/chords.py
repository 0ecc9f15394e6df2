"""
api/schemas/chords.py — Pydantic request/response schemas for chord endpoints.

Covers:
    /chords/detect  — ChordDetectRequest / ChordDetectResponse
    /chords/degree  — DegreeRequest / DegreeResponse
    /chords/format  — FormatRequest / FormatResponse
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from core.chords.types import TONIC_NOTES

# ---------------------------------------------------------------------------
# /chords/detect
# ---------------------------------------------------------------------------


class ChordDetectRequest(BaseModel):
    """A set of sounding MIDI pitches plus detection options."""

    pitches: list[int] = Field(..., max_length=88)
    accidental_notation: Literal["sharp", "flat"] = "sharp"
    return_all: bool = False
    merge_parentheses: bool = True

    @field_validator("pitches")
    @classmethod
    def pitches_in_midi_range(cls, v: list[int]) -> list[int]:
        for pitch in v:
            if not (0 <= pitch <= 127):
                raise ValueError(f"MIDI pitch {pitch} out of range [0, 127]")
        return v


class ChordDetectResponse(BaseModel):
    """Detected chord names. Empty chord / names = no chord."""

    chord: str
    names: list[str]
    pitch_classes: list[str]


# ---------------------------------------------------------------------------
# /chords/degree
# ---------------------------------------------------------------------------


class DegreeRequest(BaseModel):
    """An absolute chord name and the key to express it in."""

    chord: str = Field(..., min_length=1, max_length=64)
    tonic: str | None = None
    key_mode: Literal["major", "minor"] = "major"

    @field_validator("tonic")
    @classmethod
    def tonic_is_known(cls, v: str | None) -> str | None:
        if v is not None and v not in TONIC_NOTES:
            raise ValueError(f"Unknown tonic {v!r}. Valid: {list(TONIC_NOTES)}")
        return v


class DegreeResponse(BaseModel):
    """Degree name, or null when the chord cannot be expressed in the key."""

    chord: str
    degree: str | None


# ---------------------------------------------------------------------------
# /chords/format
# ---------------------------------------------------------------------------


class FormatRequest(BaseModel):
    """One chord name or a ", "-joined list of names."""

    chords: str = Field(..., max_length=1024)


class FormatResponse(BaseModel):
    markup: str

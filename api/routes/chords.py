"""
api/routes/chords.py — Chord recognition and notation endpoints.

Endpoints:
    POST /chords/detect — Chord name(s) for a set of MIDI pitches
    POST /chords/degree — Degree notation of a chord name in a key
    POST /chords/format — Display markup for chord names

No LLM, no database — pure calls into core/chords.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_chord_repository
from api.schemas.chords import (
    ChordDetectRequest,
    ChordDetectResponse,
    DegreeRequest,
    DegreeResponse,
    FormatRequest,
    FormatResponse,
)
from core.chords import (
    ChordMapRepository,
    chord_to_degree,
    detect_chord_names,
    format_chord_list,
    normalize_pitch_classes,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chords", tags=["chords"])


# ---------------------------------------------------------------------------
# POST /chords/detect
# ---------------------------------------------------------------------------


@router.post("/detect", response_model=ChordDetectResponse)
def detect(
    request: ChordDetectRequest,
    repository: ChordMapRepository = Depends(get_chord_repository),
) -> ChordDetectResponse:
    """Name the chord formed by a set of MIDI pitches.

    The pitches are normalized once; the same bass-first note names feed
    the detector and the pitch_classes field. Option values are already
    validated by the request schema (422 on anything else).

    Args:
        request: ChordDetectRequest with pitches and detection options.

    Returns:
        ChordDetectResponse with the preferred name, every returned name
        (one unless return_all is set), and the bass-first pitch classes.
    """
    note_names = (
        normalize_pitch_classes(request.pitches, request.accidental_notation)
        if request.pitches
        else ()
    )
    names = detect_chord_names(
        note_names,
        merge=request.merge_parentheses,
        repository=repository,
    )
    if not request.return_all:
        names = names[:1]
    logger.debug("Detected %s from notes %s", names, note_names)

    return ChordDetectResponse(
        chord=names[0] if names else "",
        names=list(names),
        pitch_classes=list(note_names),
    )


# ---------------------------------------------------------------------------
# POST /chords/degree
# ---------------------------------------------------------------------------


@router.post("/degree", response_model=DegreeResponse)
def degree(request: DegreeRequest) -> DegreeResponse:
    """Convert a chord name into degree notation.

    Returns:
        DegreeResponse whose degree is null when no tonic was given or the
        chord's root or bass is not a known note. key_mode and tonic are
        validated by the request schema.
    """
    degree_name = chord_to_degree(request.chord, request.tonic, request.key_mode)
    return DegreeResponse(chord=request.chord, degree=degree_name)


# ---------------------------------------------------------------------------
# POST /chords/format
# ---------------------------------------------------------------------------


@router.post("/format", response_model=FormatResponse)
def format_names(request: FormatRequest) -> FormatResponse:
    """Render chord names (single or ", "-joined) as display markup."""
    return FormatResponse(markup=format_chord_list(request.chords))

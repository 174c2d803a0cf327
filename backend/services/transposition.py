import logging
import re
from typing import Optional

from schemas.transpose import ChordChange, TransposeResponse
from services.chords import CHORD_CLASS, is_chord, tokenize, transpose_chord, transpose_text

logger = logging.getLogger(__name__)

_CHORD_SPAN_RE = re.compile(
    r'<span class="' + re.escape(CHORD_CLASS) + r'">(.*?)</span>', re.DOTALL
)


def effective_semitones(semitones: int, capo: Optional[int] = None) -> int:
    """Return the shift to apply to the written chords.

    A capo already raises the guitar by ``capo`` semitones, so the chords
    themselves move that much less. A capo of 0 or None changes nothing.
    """
    if capo:
        return semitones - capo
    return semitones


def transpose_sheet(
    text: str, semitones: int, capo: Optional[int] = None
) -> TransposeResponse:
    """Transpose a lyric sheet and report each chord that was rewritten."""
    shift = effective_semitones(semitones, capo)

    changes = [
        ChordChange(original=token, transposed=transpose_chord(token, shift))
        for token in tokenize(text)
        if token and not token.isspace() and is_chord(token)
    ]
    html = transpose_text(text, shift)

    logger.info(
        "Transposed %d chords (semitones=%d capo=%s effective=%d)",
        len(changes), semitones, capo, shift,
    )
    return TransposeResponse(
        html=html,
        semitones=semitones,
        capo=capo,
        effective_semitones=shift,
        chords=changes,
    )


def strip_chord_markup(html: str) -> str:
    """Remove chord spans so a rendered sheet can be edited and transposed again.

    This is not an exact inverse of ``transpose_text``: flat chords come back
    in sharp spelling ('Bb' reads back as 'A#'), and lyrics that already
    contained a literal chord span are unwrapped as well.
    """
    return _CHORD_SPAN_RE.sub(r"\1", html)

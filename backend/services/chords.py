import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Pitch classes in sharp spelling, index = semitones above C
CHROMATIC_SCALE = [
    "C", "C#", "D", "D#", "E", "F",
    "F#", "G", "G#", "A", "A#", "B",
]

# Flat roots are rewritten to their sharp equivalent before lookup
FLAT_TO_SHARP = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

CHORD_CLASS = "chord"

# Brackets, parentheses, commas and periods often hug chords in lyric sheets
_PUNCTUATION_RE = re.compile(r"[\[\](),.]")

# Root, optional accidental, at most one quality, optional ASCII extension digits
_CHORD_RE = re.compile(r"[A-G](#|b)?(m|min|M|maj|dim|aug|sus)?[0-9]*")

# Unicode whitespace, so non-breaking spaces separate tokens too
_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")


@dataclass(frozen=True)
class ChordToken:
    root: str
    suffix: str


def is_chord(word: str) -> bool:
    """Return True if ``word`` looks like a chord symbol (e.g. 'Am', 'F#m', 'Csus4').

    Surrounding punctuation such as '[Am]' or 'G,' is ignored. Slash chords
    ('C/G') and anything else outside the grammar are treated as lyrics.
    """
    cleaned = _PUNCTUATION_RE.sub("", word)
    return _CHORD_RE.fullmatch(cleaned) is not None


def split_chord(chord: str) -> ChordToken:
    """Split a chord symbol into its root ('F#') and suffix ('m7')."""
    if len(chord) > 1 and chord[1] in ("#", "b"):
        return ChordToken(root=chord[:2], suffix=chord[2:])
    return ChordToken(root=chord[:1], suffix=chord[1:])


def normalize_root(root: str) -> str:
    """Return the sharp spelling of a flat root; other roots pass through."""
    if "b" in root:
        return FLAT_TO_SHARP.get(root, root)
    return root


def pitch_index(root: str) -> int | None:
    """Return the pitch class (0-11) of a sharp or natural root, or None."""
    try:
        return CHROMATIC_SCALE.index(root)
    except ValueError:
        return None


def transpose_chord(chord: str, semitones: int) -> str:
    """Transpose a chord symbol by a signed number of semitones.

    Only the root moves; the suffix is kept as written. Roots come out in
    sharp spelling. A chord whose root cannot be placed on the chromatic
    scale is returned unchanged.
    """
    token = split_chord(chord)
    index = pitch_index(normalize_root(token.root))
    if index is None:
        logger.debug("Unrecognized root %r in %r, leaving as-is", token.root, chord)
        return chord

    new_index = (index + semitones) % len(CHROMATIC_SCALE)
    return CHROMATIC_SCALE[new_index] + token.suffix


def mark_chord(chord: str) -> str:
    return f'<span class="{CHORD_CLASS}">{chord}</span>'


def tokenize(text: str) -> list[str]:
    """Split text into alternating runs of whitespace and non-whitespace.

    ``"".join(tokenize(text)) == text`` always holds.
    """
    return _WHITESPACE_SPLIT_RE.split(text)


def transpose_text(text: str, semitones: int) -> str:
    """Transpose every chord found in a lyric sheet and mark it up.

    Chords are wrapped in ``<span class="chord">``; lyrics, spacing and line
    breaks are reproduced exactly.
    """
    parts = []
    for token in tokenize(text):
        if token.isspace() or not is_chord(token):
            parts.append(token)
        else:
            parts.append(mark_chord(transpose_chord(token, semitones)))
    return "".join(parts)

from typing import List, Optional

from pydantic import BaseModel, StrictInt, field_validator


class TransposeRequest(BaseModel):
    text: str
    semitones: StrictInt = 0
    capo: Optional[StrictInt] = None

    @field_validator("capo")
    @classmethod
    def capo_within_fretboard(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and abs(v) > 24:
            raise ValueError("capo must be between -24 and 24")
        return v


class ChordChange(BaseModel):
    original: str
    transposed: str


class TransposeResponse(BaseModel):
    html: str
    semitones: int
    capo: Optional[int] = None
    effective_semitones: int
    chords: List[ChordChange]

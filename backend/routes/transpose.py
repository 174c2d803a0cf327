import logging

from fastapi import APIRouter, HTTPException

from config import settings
from schemas.transpose import TransposeRequest
from services.transposition import transpose_sheet

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/transpose")
def transpose(req: TransposeRequest) -> dict:
    if len(req.text) > settings.max_text_chars:
        logger.warning(
            "Rejected sheet of %d chars (limit %d)", len(req.text), settings.max_text_chars
        )
        raise HTTPException(
            status_code=400,
            detail=f"text must be at most {settings.max_text_chars} characters",
        )

    response = transpose_sheet(req.text, req.semitones, req.capo)
    return response.model_dump()

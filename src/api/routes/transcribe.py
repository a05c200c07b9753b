"""
Transcription REST endpoint.

Receives an uploaded audio blob and delegates to
``src.services.pipeline``: no business logic here.
"""

import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse

from src.core.exceptions import NoAudioProvidedError
from src.core.models import ErrorResponse
from src.services import pipeline

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transcription"])


@router.post(
    "/transcribe",
    responses={
        400: {"model": ErrorResponse, "description": "No audio file provided"},
        500: {"model": ErrorResponse, "description": "Transcription or classification failed"},
    },
)
async def transcribe(audio: UploadFile | None = File(None)) -> JSONResponse:
    """Transcribe an audio upload and organize it into urgent / later tasks.

    The classification object is returned verbatim; either key may be
    missing if the model omitted it.
    """
    if audio is None:
        raise NoAudioProvidedError()

    data = await audio.read()
    logger.info(
        "Received audio upload: %s (%s, %d bytes)", audio.filename, audio.content_type, len(data)
    )
    result = await pipeline.transcribe_and_organize(data, audio.filename)
    return JSONResponse(content=result)

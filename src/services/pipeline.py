"""Transcribe-then-classify pipeline behind ``POST /api/transcribe``.

Usage::

    from src.services import pipeline

    buckets = await pipeline.transcribe_and_organize(audio_bytes, "audio.webm")
"""

import logging
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from src.core.config import get_settings
from src.core.exceptions import (
    AIResponseParseError,
    EmptyAIResponseError,
    TranscriptionError,
)
from src.services.classification import create_classifier
from src.services.llm import create_llm
from src.services.transcription import create_stt

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".webm"


@contextmanager
def temporary_upload(data: bytes, suffix: str = DEFAULT_SUFFIX) -> Iterator[Path]:
    """Write an upload to a temp file and remove it when the block exits.

    The STT SDK needs a file handle, so the bytes live on disk only for
    the duration of the provider call.
    """
    tmp_dir = get_settings().upload_tmp_dir or None
    with tempfile.NamedTemporaryFile(
        prefix="audio-", suffix=suffix, dir=tmp_dir, delete=False
    ) as fh:
        fh.write(data)
        path = Path(fh.name)
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


def _suffix_for(filename: str | None) -> str:
    suffix = Path(filename).suffix if filename else ""
    return suffix or DEFAULT_SUFFIX


async def transcribe_and_organize(audio: bytes, filename: str | None = None):
    """Run STT on the upload, then classify the transcript into task buckets.

    Args:
        audio: Raw bytes of the uploaded audio container.
        filename: Client-side filename; its extension tells the provider
            the container format.

    Returns:
        The classifier's parsed JSON, unvalidated.

    Raises:
        EmptyAIResponseError: Classifier returned no content.
        AIResponseParseError: Classifier content is not JSON.
        TranscriptionError: Any other failure along the pipeline.
    """
    settings = get_settings()

    try:
        stt = create_stt(provider=settings.stt_provider)
        with temporary_upload(audio, _suffix_for(filename)) as path:
            transcription = await stt.transcribe(str(path))
        logger.info("Transcribed %d bytes into %d chars", len(audio), len(transcription.text))

        classifier = create_classifier(create_llm(provider=settings.llm_provider))
        return await classifier.classify(transcription.text)

    except (EmptyAIResponseError, AIResponseParseError):
        raise
    except Exception as exc:
        logger.error("Error transcribing audio: %s", getattr(exc, "detail", exc))
        raise TranscriptionError() from exc

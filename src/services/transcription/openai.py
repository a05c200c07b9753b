"""OpenAI speech-to-text provider.

Uploads an audio file to the hosted transcription API
(``audio.transcriptions.create``) and returns the plain transcript.
"""

import logging

from openai import APIConnectionError, APITimeoutError, AsyncOpenAI, OpenAIError

from src.core.config import get_settings
from src.core.exceptions import TranscriptionError
from src.core.models import TranscriptionResult
from src.services.transcription.base import BaseSTT

logger = logging.getLogger(__name__)


class OpenAISTT(BaseSTT):
    """Hosted Whisper transcription.

    Args:
        api_key: OpenAI API key (falls back to settings; empty keys are not rejected here).
        model: Transcription model name (e.g. "whisper-1").
        settings: Optional Settings instance (defaults to get_settings()).
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        settings=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._api_key = api_key or self._settings.openai_api_key
        self._model = model or self._settings.stt_model
        self._client = AsyncOpenAI(api_key=self._api_key)

    async def transcribe(self, audio_path: str, **kwargs) -> TranscriptionResult:
        """Transcribe an audio file to text.

        Args:
            audio_path: Path to the uploaded audio file.
            **kwargs: Optional keys: language.

        Returns:
            TranscriptionResult with the transcript text.
        """
        params: dict = {"model": self._model}
        if kwargs.get("language"):
            params["language"] = kwargs["language"]

        try:
            with open(audio_path, "rb") as audio_file:
                transcription = await self._client.audio.transcriptions.create(
                    file=audio_file, **params
                )
        except APITimeoutError as exc:
            logger.warning("OpenAI transcription timeout: %s", exc)
            raise TranscriptionError(detail=f"Transcription timed out: {exc}") from exc
        except APIConnectionError as exc:
            logger.warning("OpenAI transcription connection error: %s", exc)
            raise TranscriptionError(detail=f"Failed to reach transcription API: {exc}") from exc
        except (OpenAIError, OSError) as exc:
            logger.error("OpenAI transcription failed: %s", exc)
            raise TranscriptionError(detail=f"Transcription failed: {exc}") from exc

        return TranscriptionResult(
            text=transcription.text,
            language=getattr(transcription, "language", None),
            duration=getattr(transcription, "duration", None),
        )

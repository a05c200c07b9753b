"""
Abstract base class for Speech-to-Text providers.

All STT implementations must implement this interface, enabling
provider-agnostic transcription in the pipeline layer.
"""

from abc import ABC, abstractmethod

from src.core.models import TranscriptionResult


class BaseSTT(ABC):
    """Interface that every STT provider must implement."""

    @abstractmethod
    async def transcribe(self, audio_path: str, **kwargs) -> TranscriptionResult:
        """Transcribe an audio file to text.

        Args:
            audio_path: Path to the audio file (any container the provider accepts).
            **kwargs: Provider-specific options (language, prompt, etc.).

        Returns:
            TranscriptionResult with at least ``text``.

        Raises:
            TranscriptionError: If the provider call fails.
        """

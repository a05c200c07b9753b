"""Shared pytest fixtures for VoiceTask test suite.

Provides mock LLM/STT providers and sample audio used across unit and
integration tests.
"""

import json
from unittest.mock import AsyncMock

import pytest

# ---------------------------------------------------------------------------
# LLM Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_llm():
    """Create a mock LLM provider for unit testing.

    Returns:
        AsyncMock: A mock implementing the BaseLLM interface whose
        generate() returns one urgent and one later task.
    """
    from src.services.llm.base import BaseLLM

    llm = AsyncMock(spec=BaseLLM)
    llm.generate.return_value = json.dumps({"urgent": ["call bank"], "later": ["buy milk"]})
    return llm


# ---------------------------------------------------------------------------
# STT Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_stt():
    """Create a mock STT provider for unit testing.

    Returns:
        AsyncMock: A mock implementing the BaseSTT interface with a
        default transcribe response.
    """
    from src.core.models import TranscriptionResult
    from src.services.transcription.base import BaseSTT

    stt = AsyncMock(spec=BaseSTT)
    stt.transcribe.return_value = TranscriptionResult(
        text="I need to call the bank today and buy milk at some point."
    )
    return stt


# ---------------------------------------------------------------------------
# Audio Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_webm_bytes():
    """Bytes standing in for a browser-recorded WebM blob.

    Starts with the EBML magic number; nothing downstream decodes it.
    """
    return b"\x1a\x45\xdf\xa3" + b"\x00" * 1020


@pytest.fixture
def sample_audio_path(tmp_path, sample_webm_bytes):
    """Write the sample blob to a temporary file.

    Returns:
        str: Path to the temporary .webm file.
    """
    path = tmp_path / "test_audio.webm"
    path.write_bytes(sample_webm_bytes)
    return str(path)

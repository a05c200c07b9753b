"""Integration test fixtures for VoiceTask.

Runs the real FastAPI app and the real pipeline; only the hosted STT and
LLM providers are replaced. The Streamlit-side ``APIClient`` talks to the
app through a Starlette ``TestClient``.
"""

from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from src.api.app import create_app
from src.services.audio.media import MediaRegistry
from src.ui.api_client import APIClient
from src.ui.controller import AppController


@pytest.fixture
def app():
    """Create a fresh FastAPI application instance."""
    return create_app()


@pytest.fixture
def providers(mock_stt, mock_llm):
    """Patch the provider factories the pipeline resolves per request."""
    with (
        patch("src.services.pipeline.create_stt", return_value=mock_stt),
        patch("src.services.pipeline.create_llm", return_value=mock_llm),
    ):
        yield mock_stt, mock_llm


@pytest.fixture
def test_client(app, providers):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api_client(test_client):
    """APIClient wired to the in-process app."""
    return APIClient(base_url="http://testserver", http_client=test_client)


@pytest.fixture
def controller():
    return AppController(media=MediaRegistry())

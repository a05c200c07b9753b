"""
FastAPI application factory.

``create_app()`` assembles the application with logging, CORS, error
handlers, the transcription router, and the health endpoint. The
module-level ``app`` instance allows ``uvicorn src.api.app:app --reload``.
"""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware.error_handler import register_error_handlers
from src.api.routes import transcribe
from src.core.config import get_settings
from src.core.models import HealthResponse


def create_app() -> FastAPI:
    """Build and return a fully configured FastAPI application."""

    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="VoiceTask",
        description="AI voice-to-text task organizer: transcription plus "
        "urgent / later task classification.",
        version="0.1.0",
    )

    # -- CORS --
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8501",  # Streamlit
            "http://localhost:3000",  # Dev frontend
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Error handlers --
    register_error_handlers(app)

    # -- Health check (root-level, not under /api) --
    @app.get("/health", response_model=HealthResponse, tags=["system"])
    async def health() -> HealthResponse:
        return HealthResponse(timestamp=datetime.now(UTC))

    # -- REST routes --
    app.include_router(transcribe.router, prefix="/api")

    return app


app = create_app()

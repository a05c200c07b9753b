"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """VoiceTask application settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        openai_api_key: Credential for the hosted STT and default LLM provider.
        stt_provider: Speech-to-text backend ("openai").
        llm_provider: Classification backend ("openai" or "claude").
        capture_backend: Where the UI records audio ("browser" or "microphone").
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Speech-to-text ---
    # Empty key is passed through as-is; provider calls fail without it
    openai_api_key: str = ""
    stt_provider: str = "openai"
    stt_model: str = "whisper-1"

    # --- Task classification LLM ---
    # Selects the LLM backend: "openai" for GPT models, "claude" for Anthropic API
    llm_provider: str = "openai"
    openai_model: str = "gpt-4o-mini"

    # Claude (Anthropic API) settings
    claude_api_key: str = ""  # Required when llm_provider="claude"
    claude_model: str = "claude-sonnet-4-20250514"

    classification_max_tokens: int = 500
    classification_temperature: float = 0.3

    # --- Uploads ---
    upload_tmp_dir: str = ""  # Empty = system temp directory

    # --- Application ---
    app_host: str = "0.0.0.0"  # Bind address for the FastAPI server
    app_port: int = 8000
    log_level: str = "INFO"  # Python logging level

    # --- UI ---
    api_base_url: str = "http://localhost:8000"
    capture_backend: str = "browser"  # "browser" = st.audio_input, "microphone" = sounddevice
    capture_sample_rate: int = 44100


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()

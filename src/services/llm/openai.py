"""
OpenAI LLM provider implementation.

Uses the OpenAI Python SDK (``openai.AsyncOpenAI``) chat completions API.
SDK errors are translated to standard Python exceptions; nothing is retried.
"""

import logging

from openai import (
    APIConnectionError,
    APITimeoutError,
    AsyncOpenAI,
    RateLimitError,
)

from src.core.config import get_settings
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


class OpenAILLM(BaseLLM):
    """OpenAI chat-completions provider (default model ``gpt-4o-mini``)."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> None:
        """Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key (falls back to settings if not provided).
            model: Chat model name.
            max_tokens: Default completion length bound.
            temperature: Default sampling temperature (0.0–2.0).
        """
        settings = get_settings()
        self._api_key = api_key or settings.openai_api_key
        self._model = model or settings.openai_model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._client = AsyncOpenAI(api_key=self._api_key)

    async def _call_api(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str | None:
        """Send a chat request and return the first choice's content."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                max_tokens=max_tokens or self._max_tokens,
                temperature=temperature if temperature is not None else self._temperature,
            )
        except APITimeoutError as exc:
            logger.warning("OpenAI API timeout: %s", exc)
            raise TimeoutError(f"OpenAI API request timed out: {exc}") from exc
        except APIConnectionError as exc:
            logger.warning("OpenAI API connection error: %s", exc)
            raise ConnectionError(f"Failed to connect to OpenAI API: {exc}") from exc
        except RateLimitError as exc:
            logger.warning("OpenAI API rate limit hit: %s", exc)
            raise ConnectionError(f"OpenAI API rate limit exceeded: {exc}") from exc
        except Exception as exc:
            logger.error("Unexpected OpenAI API error: %s", exc)
            raise RuntimeError(f"OpenAI API error: {exc}") from exc

        if not response.choices:
            return None
        return response.choices[0].message.content

    async def generate(self, prompt: str, **kwargs) -> str | None:
        """Generate a free-form text response."""
        messages: list[dict[str, str]] = []
        system = kwargs.pop("system", None)
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        return await self._call_api(
            messages=messages,
            temperature=kwargs.pop("temperature", None),
            max_tokens=kwargs.pop("max_tokens", None),
        )

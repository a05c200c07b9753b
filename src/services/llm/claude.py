"""
Claude LLM provider implementation.

Uses the Anthropic Python SDK (``anthropic.AsyncAnthropic``) to interact with
the Claude API. SDK errors are translated to standard Python exceptions;
nothing is retried.
"""

import logging

from anthropic import (
    APIConnectionError,
    APITimeoutError,
    AsyncAnthropic,
    RateLimitError,
)

from src.core.config import get_settings
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


class ClaudeLLM(BaseLLM):
    """Claude API LLM provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key or settings.claude_api_key
        self._model = model or settings.claude_model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._client = AsyncAnthropic(api_key=self._api_key)

    async def _call_api(
        self,
        user_prompt: str,
        system: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str | None:
        """Send a request to Claude.

        All SDK exceptions are translated to standard Python exceptions so
        that the classifier does not depend on the SDK's error types.
        """
        try:
            kwargs: dict = {
                "model": self._model,
                "max_tokens": max_tokens or self._max_tokens,
                "temperature": temperature if temperature is not None else self._temperature,
                "messages": [{"role": "user", "content": user_prompt}],
            }
            if system:
                kwargs["system"] = system

            response = await self._client.messages.create(**kwargs)
            if not response.content:
                return None
            return response.content[0].text

        except APITimeoutError as exc:
            logger.warning("Claude API timeout: %s", exc)
            raise TimeoutError(f"Claude API request timed out: {exc}") from exc
        except APIConnectionError as exc:
            logger.warning("Claude API connection error: %s", exc)
            raise ConnectionError(f"Failed to connect to Claude API: {exc}") from exc
        except RateLimitError as exc:
            logger.warning("Claude API rate limit hit: %s", exc)
            raise ConnectionError(f"Claude API rate limit exceeded: {exc}") from exc
        except Exception as exc:
            logger.error("Unexpected Claude API error: %s", exc)
            raise RuntimeError(f"Claude API error: {exc}") from exc

    async def generate(self, prompt: str, **kwargs) -> str | None:
        """Generate a free-form text response."""
        return await self._call_api(
            user_prompt=prompt,
            system=kwargs.pop("system", None),
            temperature=kwargs.pop("temperature", None),
            max_tokens=kwargs.pop("max_tokens", None),
        )

"""
Abstract base class for LLM providers.

All LLM implementations (OpenAI, Claude) must implement this interface,
enabling provider-agnostic classification in the service layer.
"""

from abc import ABC, abstractmethod


class BaseLLM(ABC):
    """Interface that every LLM provider must implement."""

    @abstractmethod
    async def generate(self, prompt: str, **kwargs) -> str | None:
        """Generate a free-form text response.

        Args:
            prompt: The user prompt to send to the model.
            **kwargs: Optional ``system``, ``temperature``, ``max_tokens``.

        Returns:
            The model's text response, or None when the provider returned
            no content.

        Raises:
            ConnectionError: Network failure or rate limiting.
            TimeoutError: The provider did not answer in time.
            RuntimeError: Any other provider error.
        """

"""Urgent / later task classification.

Sends a transcript to an LLM provider with a fixed instruction and parses
the reply as JSON. The parsed object is returned as-is: callers receive
whatever keys the model produced.
"""

import json
import logging
import re

from src.core.config import get_settings
from src.core.exceptions import AIResponseParseError, ClassificationError, EmptyAIResponseError
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)

# Markdown fence some models wrap around the JSON object
_FENCE_RE = re.compile(r"^```[\w-]*\s*\n(.*?)\n?```$", re.DOTALL)

TASK_SYSTEM_PROMPT = (
    "You are a task organizer. Take a messy transcript and organize it into a "
    "structured task list.\n\n"
    "Return a JSON object with this structure:\n"
    "{\n"
    '  "urgent": ["task 1", "task 2"],\n'
    '  "later": ["task 3", "task 4"]\n'
    "}\n\n"
    'Categorize tasks as "urgent" if they are time-sensitive or high priority, '
    'otherwise put them in "later".'
)

TASK_USER_PROMPT = (
    'Transcript: "{transcript}"\n\n'
    "Organize this into urgent and later tasks. Return JSON only."
)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _unfence(content: str) -> str:
    text = content.strip()
    match = _FENCE_RE.match(text)
    return match.group(1).strip() if match else text


class TaskClassifier:
    """Buckets transcript fragments into ``urgent`` and ``later`` lists."""

    def __init__(
        self,
        llm: BaseLLM,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> None:
        settings = get_settings()
        self._llm = llm
        self._max_tokens = max_tokens or settings.classification_max_tokens
        self._temperature = (
            temperature if temperature is not None else settings.classification_temperature
        )

    async def classify(self, transcript: str):
        """Classify a transcript into task buckets.

        Args:
            transcript: Plain transcript text from the STT provider.

        Returns:
            The parsed JSON value, normally ``{"urgent": [...], "later": [...]}``.

        Raises:
            EmptyAIResponseError: The provider returned no content.
            AIResponseParseError: The content is not valid JSON.
            ClassificationError: The provider call itself failed.
        """
        try:
            content = await self._llm.generate(
                TASK_USER_PROMPT.format(transcript=transcript),
                system=TASK_SYSTEM_PROMPT,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except (ConnectionError, TimeoutError, RuntimeError) as exc:
            raise ClassificationError(detail=f"LLM classification call failed: {exc}") from exc

        if not content:
            raise EmptyAIResponseError()

        try:
            return json.loads(_unfence(content), parse_constant=_reject_constant)
        except ValueError as exc:
            logger.error("Failed to parse AI response: %s", content)
            raise AIResponseParseError(content) from exc

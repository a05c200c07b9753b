"""Tests for TaskClassifier with a mocked LLM provider."""

import json
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from src.core.exceptions import AIResponseParseError, ClassificationError, EmptyAIResponseError
from src.services.classification import create_classifier
from src.services.classification.task_classifier import TASK_SYSTEM_PROMPT, TaskClassifier


@pytest.fixture(autouse=True)
def _settings():
    settings = SimpleNamespace(classification_max_tokens=500, classification_temperature=0.3)
    with patch("src.services.classification.task_classifier.get_settings", return_value=settings):
        yield


@pytest.fixture
def classifier(mock_llm):
    return TaskClassifier(mock_llm)


class TestPrompt:
    async def test_sends_fixed_instruction_and_bounds(self, classifier, mock_llm):
        await classifier.classify("call the bank")

        args, kwargs = mock_llm.generate.call_args
        assert args[0] == (
            'Transcript: "call the bank"\n\n'
            "Organize this into urgent and later tasks. Return JSON only."
        )
        assert kwargs["system"] == TASK_SYSTEM_PROMPT
        assert kwargs["max_tokens"] == 500
        assert kwargs["temperature"] == 0.3

    def test_instruction_demands_two_buckets(self):
        assert '"urgent"' in TASK_SYSTEM_PROMPT
        assert '"later"' in TASK_SYSTEM_PROMPT

    async def test_explicit_bounds_override_settings(self, mock_llm):
        classifier = TaskClassifier(mock_llm, max_tokens=100, temperature=0.0)
        await classifier.classify("x")

        kwargs = mock_llm.generate.call_args[1]
        assert kwargs["max_tokens"] == 100
        assert kwargs["temperature"] == 0.0


class TestParsing:
    async def test_returns_parsed_object(self, classifier):
        result = await classifier.classify("call bank, buy milk")
        assert result == {"urgent": ["call bank"], "later": ["buy milk"]}

    async def test_strips_markdown_fences(self, classifier, mock_llm):
        mock_llm.generate.return_value = '```json\n{"urgent": [], "later": ["nap"]}\n```'
        result = await classifier.classify("nap")
        assert result == {"urgent": [], "later": ["nap"]}

    async def test_shape_is_not_validated(self, classifier, mock_llm):
        mock_llm.generate.return_value = json.dumps({"later": "not a list"})
        result = await classifier.classify("x")
        assert result == {"later": "not a list"}

    async def test_non_json_raises_parse_error(self, classifier, mock_llm):
        mock_llm.generate.return_value = "sorry, I can't help"
        with pytest.raises(AIResponseParseError) as exc_info:
            await classifier.classify("x")
        assert exc_info.value.detail == "Failed to parse AI response"
        assert exc_info.value.content == "sorry, I can't help"

    async def test_non_json_logs_raw_content(self, classifier, mock_llm, caplog):
        mock_llm.generate.return_value = "sorry, I can't help"
        with pytest.raises(AIResponseParseError):
            await classifier.classify("x")
        assert "sorry, I can't help" in caplog.text

    @pytest.mark.parametrize(
        "content",
        [
            '{"urgent": [NaN], "later": []}',
            '{"urgent": [], "later": [Infinity]}',
            '{"urgent": [-Infinity], "later": []}',
        ],
    )
    async def test_non_standard_constants_raise_parse_error(self, classifier, mock_llm, content):
        mock_llm.generate.return_value = content
        with pytest.raises(AIResponseParseError) as exc_info:
            await classifier.classify("x")
        assert exc_info.value.content == content

    @pytest.mark.parametrize("content", [None, ""])
    async def test_empty_content_raises(self, classifier, mock_llm, content):
        mock_llm.generate.return_value = content
        with pytest.raises(EmptyAIResponseError) as exc_info:
            await classifier.classify("x")
        assert exc_info.value.detail == "No response from AI"


class TestProviderFailures:
    @pytest.mark.parametrize("error", [ConnectionError("down"), TimeoutError("slow")])
    async def test_transport_errors_wrapped(self, classifier, mock_llm, error):
        mock_llm.generate.side_effect = error
        with pytest.raises(ClassificationError):
            await classifier.classify("x")

    async def test_not_retried(self, classifier, mock_llm):
        mock_llm.generate.side_effect = ConnectionError("down")
        with pytest.raises(ClassificationError):
            await classifier.classify("x")
        assert mock_llm.generate.await_count == 1


def test_factory_returns_classifier(mock_llm):
    assert isinstance(create_classifier(mock_llm), TaskClassifier)

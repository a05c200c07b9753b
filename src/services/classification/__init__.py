"""
Classification module - Transcript to task-bucket classification.
"""

from src.services.llm.base import BaseLLM

from .task_classifier import TaskClassifier

__all__ = ["TaskClassifier", "create_classifier"]


def create_classifier(llm: BaseLLM) -> TaskClassifier:
    """Factory function to create a TaskClassifier instance.

    Args:
        llm: The LLM provider to use for classification.

    Returns:
        A configured TaskClassifier.
    """
    return TaskClassifier(llm)

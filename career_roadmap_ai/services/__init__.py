"""Service exports."""

from .llm_client import CompletionClient, OpenAICompletionClient

__all__ = ["CompletionClient", "OpenAICompletionClient"]

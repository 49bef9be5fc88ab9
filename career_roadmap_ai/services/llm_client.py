"""Completion clients: the single outbound model call, behind a small interface."""

from abc import ABC, abstractmethod
from typing import Optional

import httpx
import openai
from openai import AsyncOpenAI

from config import MODEL_NAME, MODEL_TIMEOUT_SECONDS, OPENAI_API_KEY, OPENAI_BASE_URL
from roadmap_pipeline.errors import ModelRejectedError, ModelUnavailableError
from utils.logger import get_logger

logger = get_logger(__name__)


class CompletionClient(ABC):
    """Abstract text-completion provider."""

    @abstractmethod
    async def complete(self, prompt: str, *, json_mode: bool = True, temperature: float = 0.0) -> str:
        """
        Return the model's raw text for prompt.
        json_mode asks for JSON output where the provider supports it; callers must not rely on it.
        Raises ModelUnavailableError (transport) or ModelRejectedError (policy, quota).
        """
        ...


class OpenAICompletionClient(CompletionClient):
    """Chat completions via AsyncOpenAI. Works with any OpenAI-compatible base URL."""

    def __init__(
        self,
        api_key: str = OPENAI_API_KEY,
        model: str = MODEL_NAME,
        base_url: Optional[str] = OPENAI_BASE_URL or None,
        timeout_seconds: float = MODEL_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key and not self.base_url:
                logger.error("OPENAI_API_KEY is not set; cannot call the model")
                raise ModelRejectedError("model API key is not configured")
            # No SDK-level retries: a single call per run keeps failure attribution exact
            self._client = AsyncOpenAI(
                # OpenAI-compatible local hosts ignore the key but the client requires one
                api_key=self.api_key or "not-needed",
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout_seconds),
                max_retries=0,
            )
        return self._client

    async def complete(self, prompt: str, *, json_mode: bool = True, temperature: float = 0.0) -> str:
        client = self._get_client()
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                **kwargs,
            )
        except openai.APITimeoutError as e:
            raise ModelUnavailableError(f"model request timed out: {e}") from e
        except openai.APIConnectionError as e:
            raise ModelUnavailableError(f"could not reach model: {e}") from e
        except openai.RateLimitError as e:
            raise ModelRejectedError(f"model quota or rate limit exceeded (HTTP {e.status_code})") from e
        except openai.InternalServerError as e:
            raise ModelUnavailableError(f"model server error (HTTP {e.status_code})") from e
        except openai.APIStatusError as e:
            raise ModelRejectedError(f"model rejected the request (HTTP {e.status_code})") from e

        choice = response.choices[0] if response.choices else None
        if choice is None:
            return ""
        if choice.finish_reason == "content_filter":
            raise ModelRejectedError("model response was blocked by its content filter")
        if not choice.message or not choice.message.content:
            return ""
        return choice.message.content

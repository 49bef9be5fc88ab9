"""Single, time-bounded call to the completion client."""

import asyncio
from typing import TYPE_CHECKING

from config import MODEL_TEMPERATURE, MODEL_TIMEOUT_SECONDS
from roadmap_pipeline.errors import ModelRejectedError, ModelUnavailableError
from utils.logger import get_logger

if TYPE_CHECKING:
    from services.llm_client import CompletionClient

logger = get_logger(__name__)


class ModelInvoker:
    """
    Wraps one call to a CompletionClient with fixed settings (JSON mode, temperature)
    and a hard timeout. Never retries; retry policy belongs to the caller.
    """

    def __init__(
        self,
        client: "CompletionClient",
        timeout_seconds: float = MODEL_TIMEOUT_SECONDS,
        temperature: float = MODEL_TEMPERATURE,
    ) -> None:
        self.client = client
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature

    async def invoke(self, prompt: str) -> str:
        try:
            return await asyncio.wait_for(
                self.client.complete(prompt, json_mode=True, temperature=self.temperature),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ModelUnavailableError(f"model call timed out after {self.timeout_seconds:g}s") from e
        except (ModelUnavailableError, ModelRejectedError):
            raise
        except Exception as e:
            logger.exception("Unexpected error from completion client: %s", e)
            raise ModelUnavailableError(f"model call failed: {type(e).__name__}") from e

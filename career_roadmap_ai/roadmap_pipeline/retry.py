"""Caller-side retry around a pipeline run. Only ModelUnavailable is retried."""

import asyncio
from typing import TYPE_CHECKING

from config import MODEL_MAX_ATTEMPTS, RETRY_BACKOFF_SECONDS
from schemas.generation import Failure, GenerationRequest, PipelineResult
from utils.logger import get_logger

if TYPE_CHECKING:
    from roadmap_pipeline.orchestrator import RoadmapPipeline

logger = get_logger(__name__)


async def run_with_retry(
    pipeline: "RoadmapPipeline",
    request: GenerationRequest,
    max_attempts: int = MODEL_MAX_ATTEMPTS,
    backoff_seconds: float = RETRY_BACKOFF_SECONDS,
) -> PipelineResult:
    """
    Run the pipeline up to max_attempts times. Shape failures (MalformedJson,
    SchemaViolation, NoStructuredPayloadFound) and ModelRejected are returned at once.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    result: PipelineResult = await pipeline.run(request)
    for attempt in range(2, max_attempts + 1):
        if not (isinstance(result, Failure) and result.retryable):
            break
        logger.warning(
            "Retrying roadmap generation (attempt %s/%s) after %s: %s",
            attempt,
            max_attempts,
            result.reason.value,
            result.detail,
        )
        await asyncio.sleep(backoff_seconds * (attempt - 1))  # Backoff
        result = await pipeline.run(request)
    return result

"""Roadmap pipeline: prompt -> model -> extract -> validate, with every failure returned as a value."""

import asyncio
from typing import TYPE_CHECKING, Callable, Optional

from config import MAX_DOCUMENT_CHARS, MODEL_TEMPERATURE, MODEL_TIMEOUT_SECONDS
from roadmap_pipeline.errors import PipelineError
from roadmap_pipeline.model_invoker import ModelInvoker
from roadmap_pipeline.prompt_builder import build_prompt
from roadmap_pipeline.response_extractor import extract_payload
from roadmap_pipeline.result_validator import validate_roadmap
from schemas.generation import ErrorKind, Failure, GenerationRequest, PipelineResult, Success
from schemas.roadmap import RoadmapResult
from utils.logger import get_logger

if TYPE_CHECKING:
    from services.llm_client import CompletionClient

logger = get_logger(__name__)

# Kinds that point at a prompt/response mismatch; logged with the raw text for prompt tuning
SHAPE_FAILURES = {
    ErrorKind.NO_STRUCTURED_PAYLOAD,
    ErrorKind.MALFORMED_JSON,
    ErrorKind.SCHEMA_VIOLATION,
}
RAW_EXCERPT_CHARS = 2000


def _excerpt(raw: Optional[str]) -> str:
    if raw is None:
        return "<no response>"
    if len(raw) > RAW_EXCERPT_CHARS:
        return raw[:RAW_EXCERPT_CHARS] + "...[truncated]"
    return raw


class RoadmapPipeline:
    """
    Runs one roadmap generation per call. The only outbound I/O is the single
    model call made through ModelInvoker. run() never raises except on cancellation.
    Client-side surprises are mapped by ModelInvoker; anything else escaping a stage is InternalError.
    """

    def __init__(
        self,
        client: "CompletionClient",
        *,
        timeout_seconds: float = MODEL_TIMEOUT_SECONDS,
        temperature: float = MODEL_TEMPERATURE,
        max_document_chars: int = MAX_DOCUMENT_CHARS,
        extract: Callable[[str], str] = extract_payload,
        validate: Callable[[str], RoadmapResult] = validate_roadmap,
    ) -> None:
        self.invoker = ModelInvoker(client, timeout_seconds=timeout_seconds, temperature=temperature)
        self.max_document_chars = max_document_chars
        self.extract = extract
        self.validate = validate

    async def run(self, request: GenerationRequest) -> PipelineResult:
        raw: Optional[str] = None
        try:
            prompt = build_prompt(request, self.max_document_chars)
            raw = await self.invoker.invoke(prompt)
            candidate = self.extract(raw)
            roadmap = self.validate(candidate)
        except PipelineError as e:
            if e.kind in SHAPE_FAILURES:
                logger.warning("Roadmap response rejected (%s): %s | raw response: %s", e.kind.value, e.detail, _excerpt(raw))
            else:
                logger.warning("Model call failed (%s): %s", e.kind.value, e.detail)
            return Failure(reason=e.kind, detail=e.detail)
        except Exception as e:
            logger.exception("Unexpected roadmap pipeline error: %s", e)
            return Failure(reason=ErrorKind.INTERNAL_ERROR, detail=f"unexpected error: {type(e).__name__}")

        logger.info(
            "Roadmap generated: career_paths=%s skills=%s action_items=%s",
            len(roadmap.career_paths),
            len(roadmap.current_skills),
            len(roadmap.immediate_action_items),
        )
        return Success(data=roadmap)


def default_pipeline() -> RoadmapPipeline:
    """Pipeline backed by the configured OpenAI-compatible model."""
    from services.llm_client import OpenAICompletionClient

    return RoadmapPipeline(OpenAICompletionClient())


def run_roadmap_pipeline(request: GenerationRequest, pipeline: Optional[RoadmapPipeline] = None) -> PipelineResult:
    """
    Run the pipeline from synchronous code (CLI, scripts).
    Uses its own event loop; do not call from inside a running loop.
    """
    pipeline = pipeline or default_pipeline()
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(pipeline.run(request))
    finally:
        loop.close()

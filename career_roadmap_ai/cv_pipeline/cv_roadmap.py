"""Upload-to-roadmap flow: document text extraction followed by the roadmap pipeline."""

import asyncio
from typing import Optional, Tuple

from config import MODEL_MAX_ATTEMPTS
from cv_pipeline.text_extractor import extract_text
from roadmap_pipeline.orchestrator import RoadmapPipeline, default_pipeline
from roadmap_pipeline.retry import run_with_retry
from schemas.document import ExtractedDocument
from schemas.generation import GenerationRequest, PipelineResult
from utils.logger import get_logger

logger = get_logger(__name__)


async def generate_roadmap_from_upload(
    file_bytes: bytes,
    filename: str,
    *,
    user_goals: Optional[str] = None,
    desired_direction: Optional[str] = None,
    pipeline: Optional[RoadmapPipeline] = None,
    max_attempts: int = MODEL_MAX_ATTEMPTS,
) -> Tuple[ExtractedDocument, PipelineResult]:
    """
    Extract text from the upload, then generate the roadmap.
    Raises DocumentError subclasses for unreadable uploads; pipeline failures come back as Failure.
    """
    # pdfplumber/python-docx parsing is blocking; keep it off the event loop
    document = await asyncio.to_thread(extract_text, file_bytes, filename)
    request = GenerationRequest(
        document_text=document.full_text,
        user_goals=user_goals,
        desired_direction=desired_direction,
    )
    result = await run_with_retry(pipeline or default_pipeline(), request, max_attempts=max_attempts)
    logger.info("Roadmap run finished for %s: %s", filename, result.status)
    return document, result


def run_cv_roadmap_pipeline(
    file_bytes: bytes,
    filename: str,
    user_goals: Optional[str] = None,
    desired_direction: Optional[str] = None,
) -> Tuple[ExtractedDocument, PipelineResult]:
    """
    Synchronous variant of generate_roadmap_from_upload.
    Uses asyncio to call the async LLM; safe to call from sync context.
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(
            generate_roadmap_from_upload(
                file_bytes,
                filename,
                user_goals=user_goals,
                desired_direction=desired_direction,
            )
        )
    finally:
        loop.close()

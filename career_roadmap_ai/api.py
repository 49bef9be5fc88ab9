"""
Career Roadmap AI – HTTP API.
Upload a resume, get a structured career roadmap. No business logic here; see cv_pipeline and roadmap_pipeline.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import DISCONNECT_POLL_SECONDS
from cv_pipeline.cv_roadmap import generate_roadmap_from_upload
from cv_pipeline.text_extractor import DocumentError, UnsupportedFormatError
from roadmap_pipeline.orchestrator import RoadmapPipeline, default_pipeline
from schemas.document import ExtractedDocument
from schemas.generation import ErrorKind, Failure
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

app = FastAPI(title="Career Roadmap AI")

origins = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:8000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Status per failure kind; anything not listed is a 500
FAILURE_STATUS = {
    ErrorKind.MODEL_UNAVAILABLE: 502,
}


def get_pipeline() -> RoadmapPipeline:
    """Dependency: the configured pipeline. Overridden in tests."""
    return default_pipeline()


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message},
    )


def failure_response(failure: Failure) -> JSONResponse:
    """Wire form of a pipeline Failure. Only the generic message reaches the client."""
    return _error_response(FAILURE_STATUS.get(failure.reason, 500), failure.reason.value, failure.message)


class ClientDisconnected(Exception):
    """The HTTP client went away before the roadmap was ready."""


async def run_until_disconnected(
    request: Request,
    awaitable: Awaitable[T],
    poll_seconds: float = DISCONNECT_POLL_SECONDS,
) -> T:
    """
    Await the work as a task, cancelling it as soon as the client disconnects.
    Cancellation abandons the outbound model call and skips later pipeline stages.
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_seconds)
            if done:
                return task.result()
            if await request.is_disconnected():
                task.cancel()
                await asyncio.gather(task, return_exceptions=True)
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()


def _content(document: ExtractedDocument) -> dict:
    return {
        "fullText": document.full_text,
        "pages": [{"pageNumber": p.page_number, "text": p.text} for p in document.pages],
    }


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.post("/api/roadmap")
async def create_roadmap(
    request: Request,
    file: Optional[UploadFile] = File(None),
    user_goals: Optional[str] = Form(None),
    desired_direction: Optional[str] = Form(None),
    pipeline: RoadmapPipeline = Depends(get_pipeline),
):
    """
    Accepts a resume (PDF, DOCX or text) plus optional goals and preferred direction.
    Returns {success, data, content, metadata} or {success: false, error, message}.
    """
    if file is None or not file.filename:
        return _error_response(400, "NoFile", "No file uploaded")

    file_bytes = await file.read()
    if not file_bytes:
        return _error_response(400, "NoFile", "No file uploaded")
    logger.info("Received roadmap request: file=%s size=%s", file.filename, len(file_bytes))

    try:
        document, result = await run_until_disconnected(
            request,
            generate_roadmap_from_upload(
                file_bytes,
                file.filename,
                user_goals=user_goals,
                desired_direction=desired_direction,
                pipeline=pipeline,
            ),
        )
    except UnsupportedFormatError as e:
        logger.warning("Rejected upload %s: %s", file.filename, e)
        return _error_response(400, "UnsupportedFormat", "Only PDF, DOCX and text files are allowed")
    except DocumentError as e:
        logger.warning("Unreadable upload %s: %s", file.filename, e)
        return _error_response(422, "CorruptDocument", "We couldn't read text from this file")
    except ClientDisconnected:
        logger.info("Client disconnected; abandoned roadmap generation for %s", file.filename)
        return _error_response(499, "ClientClosedRequest", "Request was cancelled")

    if isinstance(result, Failure):
        return failure_response(result)

    return {
        "success": True,
        "data": result.data.to_wire(),
        "content": _content(document),
        "metadata": {
            "fileName": file.filename,
            "fileSize": len(file_bytes),
            "totalPages": document.total_pages,
        },
    }

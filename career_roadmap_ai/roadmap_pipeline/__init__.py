"""Roadmap pipeline: prompt building, model call, payload extraction, schema validation."""

from .errors import (
    MalformedJsonError,
    ModelRejectedError,
    ModelUnavailableError,
    NoStructuredPayloadError,
    PipelineError,
    SchemaViolationError,
)
from .orchestrator import RoadmapPipeline, default_pipeline, run_roadmap_pipeline
from .prompt_builder import build_prompt
from .response_extractor import extract_payload
from .result_validator import validate_roadmap
from .retry import run_with_retry

__all__ = [
    "RoadmapPipeline",
    "default_pipeline",
    "run_roadmap_pipeline",
    "run_with_retry",
    "build_prompt",
    "extract_payload",
    "validate_roadmap",
    "PipelineError",
    "ModelUnavailableError",
    "ModelRejectedError",
    "NoStructuredPayloadError",
    "MalformedJsonError",
    "SchemaViolationError",
]

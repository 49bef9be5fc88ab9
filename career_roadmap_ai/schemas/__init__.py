"""Schema exports."""

from .document import ExtractedDocument, PageText
from .generation import ErrorKind, Failure, GenerationRequest, PipelineResult, Success
from .roadmap import CareerPath, RoadmapResult

__all__ = [
    "ExtractedDocument",
    "PageText",
    "GenerationRequest",
    "ErrorKind",
    "Success",
    "Failure",
    "PipelineResult",
    "CareerPath",
    "RoadmapResult",
]

"""CV upload pipeline: text extraction (PDF/DOCX/TXT), then roadmap generation."""

from cv_pipeline.cv_roadmap import generate_roadmap_from_upload, run_cv_roadmap_pipeline
from cv_pipeline.text_extractor import (
    CorruptDocumentError,
    DocumentError,
    UnsupportedFormatError,
    extract_text,
)
from schemas.document import ExtractedDocument

__all__ = [
    "generate_roadmap_from_upload",
    "run_cv_roadmap_pipeline",
    "extract_text",
    "ExtractedDocument",
    "DocumentError",
    "UnsupportedFormatError",
    "CorruptDocumentError",
]

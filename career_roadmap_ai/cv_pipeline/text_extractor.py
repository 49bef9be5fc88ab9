"""Extract text from uploaded resume files (PDF, DOCX, plain text). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import List

import pdfplumber
from docx import Document

from config import SUPPORTED_EXTENSIONS
from schemas.document import ExtractedDocument, PageText
from utils.logger import get_logger

logger = get_logger(__name__)


class DocumentError(Exception):
    """Upload could not be turned into text."""


class UnsupportedFormatError(DocumentError):
    pass


class CorruptDocumentError(DocumentError):
    pass


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) and replace problematic chars."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def _clean_text(text: str) -> str:
    """Remove excessive whitespace and normalize unicode."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    return t.strip()


def _extract_pdf_pages(bytes_io: BytesIO) -> List[str]:
    """Text of every PDF page, in order (empty string for image-only pages)."""
    try:
        with pdfplumber.open(bytes_io) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("PDF extraction failed: %s", e)
        raise CorruptDocumentError(f"could not read PDF: {type(e).__name__}") from e


def _extract_docx_pages(bytes_io: BytesIO) -> List[str]:
    """DOCX has no fixed pagination; the whole body is returned as one page."""
    try:
        doc = Document(bytes_io)
    except Exception as e:
        logger.warning("DOCX extraction failed: %s", e)
        raise CorruptDocumentError(f"could not read DOCX: {type(e).__name__}") from e
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    return ["\n\n".join(parts)]


def _extract_plain_pages(file_bytes: bytes) -> List[str]:
    try:
        return [file_bytes.decode("utf-8-sig")]
    except UnicodeDecodeError as e:
        raise CorruptDocumentError("text file is not valid UTF-8") from e


def extract_text(file_bytes: bytes, filename: str) -> ExtractedDocument:
    """
    Extract and clean text from an uploaded file, per page and as a whole.
    Raises UnsupportedFormatError for unknown extensions and CorruptDocumentError
    when the file cannot be read or holds no text.
    """
    name_lower = (filename or "").lower().strip()
    if not name_lower.endswith(SUPPORTED_EXTENSIONS):
        logger.warning("Unsupported file type: %s", filename)
        raise UnsupportedFormatError(f"unsupported file type: {filename or '<unnamed>'}")
    if not file_bytes:
        raise CorruptDocumentError("file is empty")

    if name_lower.endswith(".pdf"):
        raw_pages = _extract_pdf_pages(BytesIO(file_bytes))
    elif name_lower.endswith(".docx"):
        raw_pages = _extract_docx_pages(BytesIO(file_bytes))
    else:
        raw_pages = _extract_plain_pages(file_bytes)

    pages = [PageText(page_number=i, text=_clean_text(raw)) for i, raw in enumerate(raw_pages, start=1)]
    full_text = "\n\n".join(p.text for p in pages if p.text)
    if not full_text:
        raise CorruptDocumentError("document contains no extractable text")

    logger.info("Extracted %s chars from %s (%s page(s))", len(full_text), filename, len(pages))
    return ExtractedDocument(full_text=full_text, pages=pages)

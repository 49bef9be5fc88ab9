"""Extracted document text, produced once per upload and never persisted."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PageText(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_number: int = Field(..., ge=1, description="1-based page index")
    text: str = Field(default="", description="Cleaned text of this page")


class ExtractedDocument(BaseModel):
    """Full text plus per-page text of an uploaded document."""

    model_config = ConfigDict(frozen=True)

    full_text: str = Field(..., description="Cleaned text of the whole document")
    pages: List[PageText] = Field(default_factory=list, description="Pages in document order")

    @property
    def total_pages(self) -> int:
        return len(self.pages)

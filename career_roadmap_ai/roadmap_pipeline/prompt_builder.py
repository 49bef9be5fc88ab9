"""Deterministic prompt construction for roadmap generation."""

from typing import List, Optional

from config import MAX_DOCUMENT_CHARS
from schemas.generation import GenerationRequest

DOCUMENT_START = "--- RESUME START ---"
DOCUMENT_END = "--- RESUME END ---"

ROADMAP_INSTRUCTIONS = """You are an expert career counselor and technical recruiter.
Analyze the resume below and build a personalized career roadmap for the candidate.
Respond only with a single JSON object matching this exact shape (no markdown, no code block, no commentary):
{
  "profileSummary": "string",
  "currentSkills": ["string"],
  "strengths": ["string"],
  "areasForImprovement": ["string"],
  "careerPaths": [
    {
      "title": "string",
      "description": "string",
      "skillsToDevelop": ["string"],
      "timeline": "string",
      "potentialSalary": "string",
      "difficulty": "Beginner | Intermediate | Advanced"
    }
  ],
  "immediateActionItems": ["string"],
  "positiveFeedback": "string"
}
- profileSummary: 2-3 sentences describing the candidate's background. Never empty.
- currentSkills: concrete skills and technologies found in the resume.
- strengths / areasForImprovement: short, specific statements.
- careerPaths: 2-4 realistic paths. difficulty must be exactly one of "Beginner", "Intermediate", "Advanced".
- immediateActionItems: steps the candidate can start this month.
- positiveFeedback: one encouraging paragraph.
Every key must be present. Use an empty array when a list has nothing to report."""


def truncate_document(text: str, max_chars: int = MAX_DOCUMENT_CHARS) -> str:
    """Hard cut at max_chars; not sentence-aware."""
    return text[:max_chars]


def _hint(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_prompt(request: GenerationRequest, max_document_chars: int = MAX_DOCUMENT_CHARS) -> str:
    """
    Build the full instruction string for one request.
    Goal and direction sections are added only when they carry text.
    """
    parts: List[str] = [
        ROADMAP_INSTRUCTIONS,
        f"{DOCUMENT_START}\n{truncate_document(request.document_text, max_document_chars)}\n{DOCUMENT_END}",
    ]
    goals = _hint(request.user_goals)
    if goals:
        parts.append(f"Candidate's stated goals:\n{goals}")
    direction = _hint(request.desired_direction)
    if direction:
        parts.append(f"Desired career direction:\n{direction}")
    return "\n\n".join(parts)

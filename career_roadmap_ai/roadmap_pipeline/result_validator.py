"""Parse a candidate payload and validate it against RoadmapResult."""

import json

from pydantic import ValidationError

from roadmap_pipeline.errors import MalformedJsonError, SchemaViolationError
from schemas.roadmap import RoadmapResult


def _field_path(loc: tuple) -> str:
    """('careerPaths', 0, 'difficulty') -> 'careerPaths.0.difficulty'."""
    return ".".join(str(part) for part in loc) or "<root>"


def _describe_violation(err: ValidationError) -> str:
    # First violation only; 'msg' never includes the offending input value
    first = err.errors()[0]
    path = _field_path(tuple(first.get("loc", ())))
    return f"{path}: {first.get('msg', 'invalid value')} ({len(err.errors())} violation(s) total)"


def validate_roadmap(candidate: str) -> RoadmapResult:
    """
    Parse candidate as JSON and validate it. No defaults are filled in:
    a missing field is a SchemaViolationError, never an empty value.
    """
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e

    if not isinstance(data, dict):
        raise SchemaViolationError(f"<root>: expected a JSON object, got {type(data).__name__}")

    try:
        return RoadmapResult.model_validate(data)
    except ValidationError as e:
        raise SchemaViolationError(_describe_violation(e)) from e

"""Isolate the JSON object inside a possibly prose-wrapped model response."""

from roadmap_pipeline.errors import NoStructuredPayloadError


def extract_payload(raw_text: str) -> str:
    """
    Return the span from the first '{' to the last '}' inclusive.

    Permissive on purpose: prose or code fences around the object are dropped.
    Known limitation: this is not a parser. A response holding two separate objects
    yields a span that later fails JSON parsing.
    """
    text = raw_text or ""
    start = text.find("{")
    if start == -1:
        raise NoStructuredPayloadError("response contains no '{'")
    end = text.rfind("}")
    if end < start:
        raise NoStructuredPayloadError("response contains no closing '}' after the first '{'")
    return text[start:end + 1]

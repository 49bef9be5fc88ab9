"""Typed failures raised inside the roadmap pipeline, one per ErrorKind."""

from schemas.generation import ErrorKind


class PipelineError(Exception):
    """Base for all pipeline-stage failures. Carries the kind and a diagnostic detail."""

    kind: ErrorKind

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ModelUnavailableError(PipelineError):
    """Transport failure or timeout talking to the model. Retryable."""

    kind = ErrorKind.MODEL_UNAVAILABLE


class ModelRejectedError(PipelineError):
    """Model refused the request (content policy, quota, auth). Not retryable."""

    kind = ErrorKind.MODEL_REJECTED


class NoStructuredPayloadError(PipelineError):
    kind = ErrorKind.NO_STRUCTURED_PAYLOAD


class MalformedJsonError(PipelineError):
    kind = ErrorKind.MALFORMED_JSON


class SchemaViolationError(PipelineError):
    kind = ErrorKind.SCHEMA_VIOLATION

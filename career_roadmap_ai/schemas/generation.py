"""Pipeline input and output types: GenerationRequest in, PipelineResult out."""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from schemas.roadmap import RoadmapResult

USER_FAILURE_MESSAGE = "We couldn't generate your roadmap, please try again."


class ErrorKind(str, Enum):
    MODEL_UNAVAILABLE = "ModelUnavailable"
    MODEL_REJECTED = "ModelRejected"
    NO_STRUCTURED_PAYLOAD = "NoStructuredPayloadFound"
    MALFORMED_JSON = "MalformedJson"
    SCHEMA_VIOLATION = "SchemaViolation"
    INTERNAL_ERROR = "InternalError"  # Bug inside the pipeline itself; never retried


class GenerationRequest(BaseModel):
    """Resume text plus optional hints for one pipeline run."""

    model_config = ConfigDict(frozen=True)

    document_text: str = Field(..., description="Text extracted from the uploaded document")
    user_goals: Optional[str] = Field(default=None, description="What the user wants to achieve")
    desired_direction: Optional[str] = Field(default=None, description="Field or role the user leans towards")


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    data: RoadmapResult


class Failure(BaseModel):
    """
    A failed run. ``detail`` is diagnostic and never carries raw model output;
    ``message`` is the only text meant for end users.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    reason: ErrorKind
    detail: str = ""

    @property
    def message(self) -> str:
        return USER_FAILURE_MESSAGE

    @property
    def retryable(self) -> bool:
        return self.reason == ErrorKind.MODEL_UNAVAILABLE


PipelineResult = Union[Success, Failure]

import asyncio

import pytest

from conftest import SequenceCompletionClient
from roadmap_pipeline.errors import ModelRejectedError, ModelUnavailableError
from roadmap_pipeline.orchestrator import RoadmapPipeline
from roadmap_pipeline.retry import run_with_retry
from schemas.generation import ErrorKind, Failure, GenerationRequest, Success


def _retry(client, max_attempts):
    pipeline = RoadmapPipeline(client)
    request = GenerationRequest(document_text="Resume text")
    return asyncio.run(run_with_retry(pipeline, request, max_attempts=max_attempts, backoff_seconds=0))


def test_retries_model_unavailable_until_success(valid_roadmap_json):
    client = SequenceCompletionClient([ModelUnavailableError("connection reset"), valid_roadmap_json])
    result = _retry(client, max_attempts=3)
    assert isinstance(result, Success)
    assert client.calls == 2


def test_gives_up_after_max_attempts():
    client = SequenceCompletionClient([ModelUnavailableError("down")])
    result = _retry(client, max_attempts=3)
    assert isinstance(result, Failure)
    assert result.reason == ErrorKind.MODEL_UNAVAILABLE
    assert client.calls == 3


@pytest.mark.parametrize(
    "outcome",
    [
        '{"profileSummary": "", "careerPaths": []}',
        "{not json}",
        "no payload at all",
        ModelRejectedError("quota"),
    ],
)
def test_non_transient_failures_are_not_retried(outcome, valid_roadmap_json):
    client = SequenceCompletionClient([outcome, valid_roadmap_json])
    result = _retry(client, max_attempts=3)
    assert isinstance(result, Failure)
    assert client.calls == 1


def test_single_attempt_means_no_retry():
    client = SequenceCompletionClient([ModelUnavailableError("down")])
    _retry(client, max_attempts=1)
    assert client.calls == 1


def test_invalid_max_attempts():
    with pytest.raises(ValueError):
        _retry(SequenceCompletionClient(["{}"]), max_attempts=0)


def test_internal_error_is_not_retried(valid_roadmap_json):
    def broken_validate(candidate):
        raise TypeError("unexpected keyword")

    client = SequenceCompletionClient([valid_roadmap_json])
    pipeline = RoadmapPipeline(client, validate=broken_validate)
    result = asyncio.run(
        run_with_retry(pipeline, GenerationRequest(document_text="Resume text"), max_attempts=3, backoff_seconds=0)
    )
    assert result.reason == ErrorKind.INTERNAL_ERROR
    assert client.calls == 1

"""Shared fixtures: a schema-conformant roadmap and in-memory completion clients."""

import asyncio
import copy
import json
from typing import List, Optional

import pytest

from services.llm_client import CompletionClient

VALID_ROADMAP = {
    "profileSummary": "Junior full-stack developer with two years of React and Node.js experience.",
    "currentSkills": ["JavaScript", "TypeScript", "React", "Node.js", "Docker"],
    "strengths": ["Shipping features end to end", "Team collaboration"],
    "areasForImprovement": ["System design", "Cloud infrastructure"],
    "careerPaths": [
        {
            "title": "Senior Frontend Engineer",
            "description": "Deepen React expertise and own frontend architecture.",
            "skillsToDevelop": ["Performance profiling", "Design systems"],
            "timeline": "1-2 years",
            "potentialSalary": "$110k-$140k",
            "difficulty": "Intermediate",
        },
        {
            "title": "Cloud Engineer",
            "description": "Build on Docker experience towards AWS infrastructure.",
            "skillsToDevelop": ["AWS", "Terraform", "Kubernetes"],
            "timeline": "12-18 months",
            "potentialSalary": "$100k-$135k",
            "difficulty": "Advanced",
        },
    ],
    "immediateActionItems": ["Start the AWS Cloud Practitioner course", "Refactor a portfolio project with tests"],
    "positiveFeedback": "You already ship real products; that is the hardest part.",
}

RESUME_TEXT = """John Doe
Software Developer

SKILLS
JavaScript, TypeScript, Python, React, Node.js, Git, Docker

EXPERIENCE
Junior Developer at ABC Corp (2022-2024)
- Developed web applications using React
"""


class StubCompletionClient(CompletionClient):
    """Returns a fixed response (or raises) and records every call."""

    def __init__(self, response: str = "", error: Optional[BaseException] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    async def complete(self, prompt: str, *, json_mode: bool = True, temperature: float = 0.0) -> str:
        self.calls.append({"prompt": prompt, "json_mode": json_mode, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.response


class SlowCompletionClient(CompletionClient):
    """Never answers within any reasonable timeout."""

    def __init__(self, delay: float = 5.0) -> None:
        self.delay = delay
        self.cancelled = False

    async def complete(self, prompt: str, *, json_mode: bool = True, temperature: float = 0.0) -> str:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return json.dumps(VALID_ROADMAP)


class SequenceCompletionClient(CompletionClient):
    """Plays back a list of outcomes: strings are returned, exceptions raised."""

    def __init__(self, outcomes: list) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    async def complete(self, prompt: str, *, json_mode: bool = True, temperature: float = 0.0) -> str:
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def valid_roadmap() -> dict:
    return copy.deepcopy(VALID_ROADMAP)


@pytest.fixture
def valid_roadmap_json(valid_roadmap) -> str:
    return json.dumps(valid_roadmap)


@pytest.fixture
def resume_text() -> str:
    return RESUME_TEXT

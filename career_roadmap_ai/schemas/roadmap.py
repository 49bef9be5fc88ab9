"""Career roadmap schema: the exact shape a model response must satisfy."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]


class CareerPath(BaseModel):
    """One recommended career direction."""

    model_config = ConfigDict(populate_by_name=True)

    title: StrictStr = Field(..., description="Role or path title")
    description: StrictStr = Field(..., description="Why this path fits the candidate")
    skills_to_develop: List[StrictStr] = Field(..., alias="skillsToDevelop", description="Skills still to learn")
    timeline: StrictStr = Field(..., description="Expected time to become job-ready (e.g. '6-12 months')")
    potential_salary: StrictStr = Field(..., alias="potentialSalary", description="Salary range as free text")
    difficulty: Difficulty = Field(..., description="Beginner, Intermediate or Advanced")


class RoadmapResult(BaseModel):
    """
    Validated career roadmap. Every field is required; list fields may be empty.
    A roadmap without a summary or without at least one titled career path is rejected.
    """

    model_config = ConfigDict(populate_by_name=True)

    profile_summary: StrictStr = Field(..., alias="profileSummary")
    current_skills: List[StrictStr] = Field(..., alias="currentSkills")
    strengths: List[StrictStr] = Field(...)
    areas_for_improvement: List[StrictStr] = Field(..., alias="areasForImprovement")
    career_paths: List[CareerPath] = Field(..., alias="careerPaths")
    immediate_action_items: List[StrictStr] = Field(..., alias="immediateActionItems")
    positive_feedback: StrictStr = Field(..., alias="positiveFeedback")

    @field_validator("profile_summary")
    @classmethod
    def _summary_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("career_paths")
    @classmethod
    def _has_titled_path(cls, value: List[CareerPath]) -> List[CareerPath]:
        if not value:
            raise ValueError("must contain at least one career path")
        if not any(p.title.strip() for p in value):
            raise ValueError("at least one career path must have a non-empty title")
        return value

    def to_wire(self) -> dict:
        """Serialize with the camelCase field names used on the wire."""
        return self.model_dump(by_alias=True)

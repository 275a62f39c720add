"""Input and output models for insights extraction."""

from functools import lru_cache
from importlib import resources
from typing import Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

SCHEMA_FILE = "insights_schema.json"


class AssessmentRecord(BaseModel):
    """Raw narrative describing one user's performance."""

    model_config = ConfigDict(frozen=True)

    # Documents exported from the assessment store name the field assessment_result
    result: str = Field(validation_alias=AliasChoices("result", "assessment_result"))


class InsightsResult(BaseModel):
    """
    Structured insights decoded from a model response.

    Field aliases are the JSON keys of the published output schema. Decoding is
    strict: every key is required, no extra keys, no type coercion.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    overall_assessment: str
    correct_answers: int = Field(alias="questions_answered_correctly")
    strengths: List[str]
    weaknesses: List[str]
    actionable_feedback: Dict[str, str]
    business_impact: Dict[str, str] = Field(alias="business_case_impact_analysis")

    def to_json(self) -> str:
        """Serialize with the schema's JSON keys."""
        return self.model_dump_json(by_alias=True)


@lru_cache(maxsize=1)
def load_insights_schema() -> str:
    """Return the JSON Schema text shipped with the package."""
    return (
        resources.files("assessment_insights.extraction")
        .joinpath(SCHEMA_FILE)
        .read_text(encoding="utf-8")
    )

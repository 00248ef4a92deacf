"""
Report models produced by the story analyzer.

Field names are snake_case in Python and camelCase on the wire, matching
the JSON contract consumed by the UI.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    """Base for report models: immutable, camelCase aliases."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class FormatMatch(ReportModel):
    """Persona, goal and value extracted from an "As a ..., I want ..., so that ..." story.

    `article` is the "a" or "an" the author wrote before the persona.
    """

    article: str = "a"
    persona: str
    goal: str
    value: str


class CriteriaAnalysis(ReportModel):
    """Acceptance criteria split into lines with testability counters."""

    criteria: List[str] = Field(default_factory=list)
    testable_keywords_found: bool = False
    non_testable_count: int = 0

    @property
    def count(self) -> int:
        return len(self.criteria)


class CriterionScore(ReportModel):
    """Clarity sub-score."""

    score: int
    feedback: str


class InvestScore(ReportModel):
    """INVEST sub-score."""

    score: int
    justification: str


class ClarityAnalysis(ReportModel):
    format_check: CriterionScore
    clarity_ambiguity: CriterionScore
    acceptance_criteria: CriterionScore
    total_score: int


class InvestAssessment(ReportModel):
    independent: InvestScore
    negotiable: InvestScore
    valuable: InvestScore
    estimable: InvestScore
    small: InvestScore
    testable: InvestScore
    total_score: int


class ScoreBreakdown(ReportModel):
    clarity_requirement_analysis: int
    invest_criteria_assessment: int


class OverallReadiness(ReportModel):
    readiness_rating: int = Field(ge=0, le=100)
    readiness_category: str
    summary: str
    score_breakdown: ScoreBreakdown


class Recommendations(ReportModel):
    suggested_improvements: str
    story_decomposition: List[str] = Field(default_factory=list)
    inferred_acceptance_criteria: List[str] = Field(default_factory=list)


class StoryReport(ReportModel):
    """Complete analysis of a single user story."""

    overall_readiness_score: OverallReadiness
    clarity_and_requirement_analysis: ClarityAnalysis
    invest_criteria_assessment: InvestAssessment
    outstanding_queries_and_conflicts: List[str] = Field(default_factory=list)
    actionable_recommendations: Recommendations
    error: Optional[str] = None

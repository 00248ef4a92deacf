"""
Story Analyzer - scores a user story for clarity and INVEST readiness.

Runs, in order:
- Format matching and acceptance criteria analysis
- Clarity scoring and INVEST assessment
- Readiness classification and recommendation generation

Outputs a StoryReport. The analyzer holds only its (immutable) scoring
configuration, so one instance can serve any number of callers.
"""

from typing import Any, Optional

from loguru import logger

from storyscore.analysis.acceptance_criteria import analyze_acceptance_criteria
from storyscore.analysis.clarity import score_clarity
from storyscore.analysis.format_matcher import match_story_format
from storyscore.analysis.invest import assess_invest
from storyscore.analysis.readiness import classify_readiness, readiness_percentage
from storyscore.analysis.recommendations import generate_recommendations
from storyscore.models.report import (
    ClarityAnalysis,
    CriterionScore,
    InvestAssessment,
    InvestScore,
    OverallReadiness,
    Recommendations,
    ScoreBreakdown,
    StoryReport,
)
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig

NO_STORY = "No story provided."
EMPTY_STORY_ERROR = "Story is empty or missing. Please provide a user story to analyze."


class StoryAnalyzer:
    """
    Scores user stories.

    Usage:
        analyzer = StoryAnalyzer()
        report = analyzer.analyze(story, acceptance_criteria)
        print(report.to_json())
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or DEFAULT_SCORING_CONFIG

    def analyze(self, story: Any, acceptance_criteria: Optional[str] = "") -> StoryReport:
        """
        Analyze a story and its acceptance criteria.

        Args:
            story: User story text. Missing, non-text or blank input yields the empty report.
            acceptance_criteria: Acceptance criteria, one per line. None is treated as empty.

        Returns:
            StoryReport

        Raises:
            TypeError: If acceptance_criteria is neither text nor None
        """
        if not isinstance(story, str) or not story.strip():
            logger.info("[ANALYZER] No story provided, returning empty report")
            return self.empty_report()

        if acceptance_criteria is None:
            acceptance_criteria = ""
        if not isinstance(acceptance_criteria, str):
            raise TypeError(
                f"acceptance criteria must be text, got {type(acceptance_criteria).__name__}"
            )

        config = self.config
        logger.info(f"[ANALYZER] Analyzing story ({len(story)} chars, {len(acceptance_criteria)} chars of ACs)")

        format_match = match_story_format(story, config)
        ac_analysis = analyze_acceptance_criteria(acceptance_criteria, config)

        clarity = score_clarity(story, acceptance_criteria, format_match, ac_analysis, config)
        invest = assess_invest(story, format_match, ac_analysis, config)

        percentage = readiness_percentage(clarity.total_score, invest.total_score)
        band = classify_readiness(percentage, config)
        result = generate_recommendations(clarity, invest, format_match, ac_analysis, config)

        logger.info(
            f"[ANALYZER] Analysis complete: rating={percentage}%, "
            f"clarity={clarity.total_score}/40, invest={invest.total_score}/60"
        )

        return StoryReport(
            overall_readiness_score=OverallReadiness(
                readiness_rating=percentage,
                readiness_category=band.label,
                summary=band.summary,
                score_breakdown=ScoreBreakdown(
                    clarity_requirement_analysis=clarity.total_score,
                    invest_criteria_assessment=invest.total_score,
                ),
            ),
            clarity_and_requirement_analysis=clarity,
            invest_criteria_assessment=invest,
            outstanding_queries_and_conflicts=result.queries,
            actionable_recommendations=result.recommendations,
        )

    def empty_report(self) -> StoryReport:
        """Fixed report returned when there is no story to score."""
        empty_section = CriterionScore(score=0, feedback=NO_STORY)
        empty_invest = InvestScore(score=0, justification=NO_STORY)
        band = classify_readiness(0, self.config)

        return StoryReport(
            overall_readiness_score=OverallReadiness(
                readiness_rating=0,
                readiness_category=band.label,
                summary="Story is empty or missing. Please provide a user story.",
                score_breakdown=ScoreBreakdown(
                    clarity_requirement_analysis=0,
                    invest_criteria_assessment=0,
                ),
            ),
            clarity_and_requirement_analysis=ClarityAnalysis(
                format_check=empty_section,
                clarity_ambiguity=empty_section,
                acceptance_criteria=empty_section,
                total_score=0,
            ),
            invest_criteria_assessment=InvestAssessment(
                independent=empty_invest,
                negotiable=empty_invest,
                valuable=empty_invest,
                estimable=empty_invest,
                small=empty_invest,
                testable=empty_invest,
                total_score=0,
            ),
            outstanding_queries_and_conflicts=["What is the user story you would like to analyze?"],
            actionable_recommendations=Recommendations(
                suggested_improvements="Please provide the user story text.",
            ),
            error=EMPTY_STORY_ERROR,
        )


def analyze_story(
    story: Any,
    acceptance_criteria: Optional[str] = "",
    config: Optional[ScoringConfig] = None
) -> StoryReport:
    """
    Convenience function to analyze a story with a one-off analyzer.

    Args:
        story: User story text
        acceptance_criteria: Acceptance criteria text
        config: Optional scoring configuration (defaults apply otherwise)

    Returns:
        StoryReport
    """
    return StoryAnalyzer(config).analyze(story, acceptance_criteria)

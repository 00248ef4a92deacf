"""
INVEST assessment (Independent, Negotiable, Valuable, Estimable, Small, Testable).

Each letter is scored on its own from the story text, the format match and
the acceptance criteria analysis. Maximum total is 60.
"""

from typing import Optional

from loguru import logger

from storyscore.analysis.clarity import find_keywords
from storyscore.models.report import CriteriaAnalysis, FormatMatch, InvestAssessment, InvestScore
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig


def assess_independent(story: str, config: ScoringConfig) -> InvestScore:
    dependencies = find_keywords(story, config.keywords.dependencies)
    if dependencies:
        return InvestScore(
            score=config.weights.invest_low,
            justification=(
                "Story may have dependencies based on keywords. "
                "Clarify if it can be worked on without external blockers."
            ),
        )
    return InvestScore(
        score=config.weights.invest_medium,
        justification="Assumed to be developable independently. Review for hidden dependencies.",
    )


def assess_negotiable(story: str, config: ScoringConfig) -> InvestScore:
    if find_keywords(story, config.keywords.technical):
        return InvestScore(
            score=config.weights.invest_low,
            justification=(
                "Story might be too prescriptive with technical details. "
                "Focus on user needs, not implementation."
            ),
        )
    return InvestScore(
        score=config.weights.invest_high,
        justification="Story seems to describe 'what' not 'how', allowing for implementation discussion.",
    )


def assess_valuable(format_match: Optional[FormatMatch], config: ScoringConfig) -> InvestScore:
    if format_match and len(format_match.value.strip()) > config.thresholds.min_value_clause_length:
        return InvestScore(
            score=config.weights.invest_max,
            justification=f"Value proposition '{format_match.value}' seems clear.",
        )
    return InvestScore(
        score=config.weights.invest_low,
        justification=(
            "The 'so that [value]' part of the story is missing or unclear. "
            "State the benefit to the user or business."
        ),
    )


def assess_estimable(story: str, ac_analysis: CriteriaAnalysis, config: ScoringConfig) -> InvestScore:
    if ac_analysis.count > 0 and len(story) > config.thresholds.short_story_length:
        return InvestScore(
            score=config.weights.invest_high,
            justification="Story and ACs provide a solid basis for estimation.",
        )
    return InvestScore(
        score=config.weights.invest_medium,
        justification=(
            "Story or ACs may be too vague or missing, making estimation difficult. "
            "Please provide more detail."
        ),
    )


def assess_small(story: str, ac_analysis: CriteriaAnalysis, config: ScoringConfig) -> InvestScore:
    thresholds = config.thresholds
    if len(story) > thresholds.long_story_length or ac_analysis.count > thresholds.max_acceptance_criteria:
        return InvestScore(
            score=config.weights.invest_low,
            justification=(
                "Story or number of ACs seems large. "
                "Consider if it can be broken down into smaller, valuable pieces."
            ),
        )
    return InvestScore(
        score=config.weights.invest_high,
        justification="Story appears to be a reasonable size, likely completable within a single sprint.",
    )


def assess_testable(ac_analysis: CriteriaAnalysis, config: ScoringConfig) -> InvestScore:
    weights = config.weights
    if ac_analysis.count == 0:
        return InvestScore(
            score=weights.invest_low,
            justification="Testability cannot be assessed without clear acceptance criteria.",
        )

    score = weights.invest_high if ac_analysis.testable_keywords_found else weights.invest_medium
    justification = (
        "Acceptance criteria provided. "
        "Ensure they are unambiguous and allow for clear pass/fail conditions."
    )
    if ac_analysis.non_testable_count > 0:
        justification += (
            f" {ac_analysis.non_testable_count} AC(s) may benefit from clearer testable language "
            "(e.g., using 'Verify that...')."
        )
    return InvestScore(score=score, justification=justification)


def assess_invest(
    story: str,
    format_match: Optional[FormatMatch],
    ac_analysis: CriteriaAnalysis,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> InvestAssessment:
    """
    Assess a story against all six INVEST criteria.

    Returns:
        InvestAssessment with one sub-score per letter and their total
    """
    scores = {
        "independent": assess_independent(story, config),
        "negotiable": assess_negotiable(story, config),
        "valuable": assess_valuable(format_match, config),
        "estimable": assess_estimable(story, ac_analysis, config),
        "small": assess_small(story, ac_analysis, config),
        "testable": assess_testable(ac_analysis, config),
    }
    total = sum(item.score for item in scores.values())

    logger.debug(
        "[INVEST] " + ", ".join(f"{name}={item.score}" for name, item in scores.items()) + f" total={total}"
    )
    return InvestAssessment(total_score=total, **scores)

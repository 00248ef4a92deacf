"""
Clarity and requirement scoring: template format, wording, acceptance criteria.

Maximum total is 40 (format 10, clarity 15, acceptance criteria 15).
"""

from typing import List, Optional

from storyscore.models.report import ClarityAnalysis, CriteriaAnalysis, CriterionScore, FormatMatch
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig

TEMPLATE = "'As a [persona], I want [goal], so that [value]'"


def find_keywords(text: str, keywords) -> List[str]:
    """Return the keywords that occur in text as case-insensitive substrings."""
    lowered = text.lower()
    return [keyword for keyword in keywords if keyword in lowered]


def score_format(format_match: Optional[FormatMatch], config: ScoringConfig) -> CriterionScore:
    if format_match:
        return CriterionScore(
            score=config.weights.format_success,
            feedback=f"Story follows the standard {TEMPLATE} format.",
        )
    return CriterionScore(
        score=config.weights.format_fail,
        feedback=(
            f"Story does not strictly follow the {TEMPLATE} format. "
            "This helps ensure role, action, and benefit are clear."
        ),
    )


def score_clarity_ambiguity(story: str, config: ScoringConfig) -> CriterionScore:
    weights = config.weights
    score = weights.clarity_base
    issues = []

    if len(story) < config.thresholds.short_story_length:
        issues.append("Story seems very short, ensure it's sufficiently detailed.")
    else:
        score += weights.clarity_bonus_concise

    ambiguous = find_keywords(story, config.keywords.ambiguous)
    if ambiguous:
        terms = ", ".join(f"'{term}'" for term in ambiguous)
        issues.append(f"Avoid ambiguous terms like {terms}. Be specific.")
    else:
        score += weights.clarity_bonus_specific

    return CriterionScore(
        score=min(weights.clarity_max, score),
        feedback=" ".join(issues) if issues else "Language appears reasonably clear.",
    )


def score_acceptance_criteria(
    acceptance_criteria_text: Optional[str],
    ac_analysis: CriteriaAnalysis,
    config: ScoringConfig
) -> CriterionScore:
    weights = config.weights

    if not acceptance_criteria_text:
        return CriterionScore(
            score=weights.ac_missing,
            feedback=(
                "Acceptance criteria are missing. Clear, testable ACs are essential. "
                "Consider using the 'Given/When/Then' format."
            ),
        )

    if ac_analysis.count == 0:
        return CriterionScore(
            score=weights.ac_empty,
            feedback=(
                "Acceptance criteria section is present but empty. "
                "Please define clear, testable acceptance criteria."
            ),
        )

    score = weights.ac_provided
    feedback = (
        f"Acceptance criteria provided ({ac_analysis.count} criteria found). "
        "Ensure they are specific and testable."
    )
    if ac_analysis.non_testable_count > ac_analysis.count / 2:
        score = max(0, score - weights.ac_non_testable_deduction)
        feedback += (
            " Some ACs may not be easily testable; consider phrasing with keywords like "
            "'Verify that...' or using Gherkin (Given/When/Then)."
        )

    return CriterionScore(score=score, feedback=feedback)


def score_clarity(
    story: str,
    acceptance_criteria_text: Optional[str],
    format_match: Optional[FormatMatch],
    ac_analysis: CriteriaAnalysis,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> ClarityAnalysis:
    """
    Score format, wording and acceptance criteria of a story.

    Args:
        story: Non-blank story text
        acceptance_criteria_text: Raw AC text as provided (may be empty)
        format_match: Result of the format matcher
        ac_analysis: Result of the acceptance criteria analyzer
        config: Scoring configuration

    Returns:
        ClarityAnalysis with the three sub-scores and their total
    """
    format_check = score_format(format_match, config)
    clarity_ambiguity = score_clarity_ambiguity(story, config)
    acceptance_criteria = score_acceptance_criteria(acceptance_criteria_text, ac_analysis, config)

    return ClarityAnalysis(
        format_check=format_check,
        clarity_ambiguity=clarity_ambiguity,
        acceptance_criteria=acceptance_criteria,
        total_score=format_check.score + clarity_ambiguity.score + acceptance_criteria.score,
    )

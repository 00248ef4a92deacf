"""
Queries and recommendations derived from the sub-scores.

Rules run in a fixed order; that order is the order of the queries and
improvements in the report.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from storyscore.models.report import (
    ClarityAnalysis,
    CriteriaAnalysis,
    FormatMatch,
    InvestAssessment,
    Recommendations,
)
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig

NO_IMPROVEMENTS = "Story is in good shape. No major improvements suggested."

GENERIC_DECOMPOSITION = (
    "If the story is too large, consider splitting it by acceptance criteria, or by sub-steps "
    "in the user's workflow. Each smaller story should still be valuable and testable."
)

CRUD_ACTIONS = ("create", "edit", "delete")


@dataclass
class RecommendationSet:
    """Queries plus recommendations for a single story."""
    queries: List[str] = field(default_factory=list)
    recommendations: Optional[Recommendations] = None


def _strip_to(goal: str) -> str:
    goal = goal.strip()
    return goal[3:] if goal.lower().startswith("to ") else goal


def suggest_decomposition(format_match: Optional[FormatMatch], config: ScoringConfig) -> List[str]:
    """Generic split advice, plus create/edit/delete stories for 'manage X' goals."""
    suggestions = [GENERIC_DECOMPOSITION]
    if not format_match:
        return suggestions

    goal = format_match.goal.strip()
    lowered = goal.lower()
    for trigger in config.keywords.decomposition_triggers:
        index = lowered.find(trigger)
        if index < 0:
            continue
        subject = goal[index + len(trigger):].strip(" .") or "items"
        persona = format_match.persona.strip()
        value = format_match.value.strip()
        for action in CRUD_ACTIONS:
            suggestions.append(f"As {format_match.article} {persona}, I want to {action} {subject}, so that {value}")
        break

    return suggestions


def infer_acceptance_criteria(format_match: Optional[FormatMatch]) -> List[str]:
    """Draft a Given/When/Then criterion from the story template parts."""
    if not format_match:
        return []
    persona = format_match.persona.strip()
    action = _strip_to(format_match.goal)
    value = format_match.value.strip().rstrip(".")
    if not (persona and action and value):
        return []
    return [f"Given I am {format_match.article} {persona}, When I {action}, Then {value}."]


def generate_recommendations(
    clarity: ClarityAnalysis,
    invest: InvestAssessment,
    format_match: Optional[FormatMatch],
    ac_analysis: CriteriaAnalysis,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> RecommendationSet:
    """
    Turn low sub-scores into outstanding queries and suggested improvements.

    Args:
        clarity: Clarity analysis
        invest: INVEST assessment
        format_match: Format matcher result (used for decomposition and inferred ACs)
        ac_analysis: Acceptance criteria analysis
        config: Scoring configuration providing the "good" thresholds

    Returns:
        RecommendationSet
    """
    weights = config.weights
    queries: List[str] = []
    improvements: List[str] = []
    decomposition: List[str] = []

    if clarity.format_check.score < weights.format_success:
        improvements.append(
            'Rephrase story to fit the standard format: "As a [persona], I want [goal], so that [value]".'
        )

    if clarity.acceptance_criteria.score < weights.ac_provided:
        queries.append("Could you provide or refine the acceptance criteria to be more specific and testable?")
        improvements.append(f"Refine ACs: {clarity.acceptance_criteria.feedback}")

    if invest.valuable.score < weights.invest_max:
        queries.append("What is the specific value or benefit this story delivers?")
        improvements.append(f"Clarify value: {invest.valuable.justification}")

    if invest.small.score < weights.invest_high:
        queries.append("Is this story small enough for one sprint? If not, how can it be split?")
        improvements.append(f"Consider story size: {invest.small.justification}")
        decomposition.extend(suggest_decomposition(format_match, config))

    if invest.testable.score < weights.invest_high:
        queries.append("Are the success conditions clear and testable? How would you verify this story is done?")
        improvements.append(f"Improve testability: {invest.testable.justification}")

    if invest.independent.score < weights.invest_medium:
        queries.append("Are there any hidden dependencies? Can this be developed independently?")
        improvements.append(f"Clarify independence: {invest.independent.justification}")

    inferred = infer_acceptance_criteria(format_match) if ac_analysis.count == 0 else []

    return RecommendationSet(
        queries=queries,
        recommendations=Recommendations(
            suggested_improvements="\n".join(improvements) if improvements else NO_IMPROVEMENTS,
            story_decomposition=decomposition,
            inferred_acceptance_criteria=inferred,
        ),
    )

"""
Acceptance criteria analysis.
"""

from typing import Optional

from storyscore.models.report import CriteriaAnalysis
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig


def analyze_acceptance_criteria(
    text: Optional[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> CriteriaAnalysis:
    """
    Split AC text into criteria and count lines without testable wording.

    Each non-blank line is one criterion. A line is testable when it contains
    any of the configured testable keywords (case-insensitive).
    """
    if not text or not text.strip():
        return CriteriaAnalysis()

    criteria = [line.strip() for line in text.splitlines() if line.strip()]
    keywords = config.keywords.testable_ac

    non_testable_count = 0
    testable_found = False
    for criterion in criteria:
        lowered = criterion.lower()
        if any(keyword in lowered for keyword in keywords):
            testable_found = True
        else:
            non_testable_count += 1

    return CriteriaAnalysis(
        criteria=criteria,
        testable_keywords_found=testable_found,
        non_testable_count=non_testable_count,
    )

"""
Markdown rendering of a StoryReport.
"""

from typing import List

from storyscore.models.report import StoryReport

INVEST_LABELS = [
    ("independent", "Independent"),
    ("negotiable", "Negotiable"),
    ("valuable", "Valuable"),
    ("estimable", "Estimable"),
    ("small", "Small"),
    ("testable", "Testable"),
]


def _bullets(items: List[str], empty: str) -> List[str]:
    if not items:
        return [f"_{empty}_"]
    return [f"- {item}" for item in items]


def render_markdown(report: StoryReport) -> str:
    """
    Render a report as a Markdown document.

    Args:
        report: Report produced by StoryAnalyzer

    Returns:
        Markdown text
    """
    overall = report.overall_readiness_score
    clarity = report.clarity_and_requirement_analysis
    invest = report.invest_criteria_assessment
    recommendations = report.actionable_recommendations

    lines = [
        "# User Story Analysis Report",
        "",
        "## Overall Readiness Score",
        "",
        f"**Readiness Rating:** {overall.readiness_rating}%",
        f"**Readiness Category:** {overall.readiness_category}",
        f"**Summary:** {overall.summary}",
        "",
        f"- Clarity & Requirement Analysis: {overall.score_breakdown.clarity_requirement_analysis} / 40",
        f"- INVEST Criteria Assessment: {overall.score_breakdown.invest_criteria_assessment} / 60",
        "",
        f"## Clarity and Requirement Analysis ({clarity.total_score} / 40)",
        "",
        f"- **Format Check ({clarity.format_check.score} / 10):** {clarity.format_check.feedback}",
        f"- **Clarity & Ambiguity ({clarity.clarity_ambiguity.score} / 15):** {clarity.clarity_ambiguity.feedback}",
        f"- **Acceptance Criteria ({clarity.acceptance_criteria.score} / 15):** "
        f"{clarity.acceptance_criteria.feedback}",
        "",
        f"## INVEST Criteria Assessment ({invest.total_score} / 60)",
        "",
    ]

    for attr, label in INVEST_LABELS:
        item = getattr(invest, attr)
        lines.append(f"- **{label} ({item.score} / 10):** {item.justification}")

    lines += ["", "## Outstanding Queries and Conflicts", ""]
    lines += _bullets(report.outstanding_queries_and_conflicts, "No outstanding queries.")

    improvements = [line for line in recommendations.suggested_improvements.split("\n") if line.strip()]
    lines += ["", "## Actionable Recommendations", "", "### Suggested Improvements", ""]
    lines += _bullets(improvements, "No improvements suggested.")

    lines += ["", "### Story Decomposition", ""]
    lines += _bullets(recommendations.story_decomposition, "No decomposition needed.")

    lines += ["", "### Inferred Acceptance Criteria", ""]
    lines += _bullets(recommendations.inferred_acceptance_criteria, "None inferred.")

    return "\n".join(lines) + "\n"

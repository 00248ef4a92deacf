"""Data models for story analysis."""

from .report import (
    ClarityAnalysis,
    CriteriaAnalysis,
    CriterionScore,
    FormatMatch,
    InvestAssessment,
    InvestScore,
    OverallReadiness,
    Recommendations,
    ScoreBreakdown,
    StoryReport,
)
from .scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ReadinessBand,
    ScoringConfig,
    ScoringConfigError,
)

__all__ = [
    'ClarityAnalysis',
    'CriteriaAnalysis',
    'CriterionScore',
    'FormatMatch',
    'InvestAssessment',
    'InvestScore',
    'OverallReadiness',
    'Recommendations',
    'ScoreBreakdown',
    'StoryReport',
    'DEFAULT_SCORING_CONFIG',
    'ReadinessBand',
    'ScoringConfig',
    'ScoringConfigError',
]

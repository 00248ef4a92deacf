"""
Readiness classification.
"""

from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ReadinessBand, ScoringConfig

MAX_CLARITY_SCORE = 40
MAX_INVEST_SCORE = 60


def readiness_percentage(clarity_total: int, invest_total: int) -> int:
    """Overall readiness as a rounded percentage of the 100 available points."""
    total_possible = MAX_CLARITY_SCORE + MAX_INVEST_SCORE
    percentage = int(round(100 * (clarity_total + invest_total) / total_possible))
    return max(0, min(100, percentage))


def classify_readiness(percentage: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> ReadinessBand:
    """Return the first band (highest threshold first) the percentage reaches."""
    for band in config.readiness_bands:
        if percentage >= band.threshold:
            return band
    return config.readiness_bands[-1]

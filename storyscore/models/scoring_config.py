"""
Scoring configuration for the story analyzer.

All thresholds, keyword sets, weights and readiness bands live here so the
scorers can be tuned without touching their logic. A config is immutable;
load a different one and pass it to StoryAnalyzer to change behaviour.
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ScoringConfigError(ValueError):
    """Raised when a scoring configuration file cannot be loaded."""


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Thresholds(_FrozenModel):
    """Length and count limits used by the heuristics."""

    short_story_length: int = Field(default=25, description="Stories shorter than this lose the concise bonus")
    long_story_length: int = Field(default=200, description="Stories longer than this are flagged as too large")
    max_acceptance_criteria: int = Field(default=7, description="More ACs than this suggests an epic")
    min_value_clause_length: int = Field(default=5, description="Value clause must be longer than this to count")


class KeywordSets(_FrozenModel):
    """Case-insensitive substrings searched for in story and AC text."""

    ambiguous: Tuple[str, ...] = ("should", "could", "might", "etc.", "and/or")
    dependencies: Tuple[str, ...] = ("dependent on", "after", "following", "once")
    technical: Tuple[str, ...] = ("database", "api endpoint", "react component", "algorithm", "sql")
    testable_ac: Tuple[str, ...] = ("verify that", "ensure that", "given", "when", "then", "confirm that")
    decomposition_triggers: Tuple[str, ...] = ("manage",)

    @field_validator("*")
    @classmethod
    def _lowercase(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(word.lower() for word in value if word.strip())


class ScoringWeights(_FrozenModel):
    """Points awarded by each scorer."""

    format_success: int = 10
    format_fail: int = 2
    clarity_base: int = 10
    clarity_bonus_concise: int = 5
    clarity_bonus_specific: int = 5
    clarity_max: int = 15
    ac_provided: int = 15
    ac_empty: int = 5
    ac_missing: int = 0
    ac_non_testable_deduction: int = 5
    invest_high: int = 8
    invest_medium: int = 6
    invest_low: int = 3
    invest_max: int = 10


class ReadinessBand(_FrozenModel):
    """A readiness category selected when the percentage reaches `threshold`."""

    threshold: int
    label: str
    summary: str


DEFAULT_READINESS_BANDS: Tuple[ReadinessBand, ...] = (
    ReadinessBand(
        threshold=90,
        label="✅ Excellent – Ready for Development",
        summary="Story is well-formed, clear, and meets all INVEST criteria. Minimal or no changes needed.",
    ),
    ReadinessBand(
        threshold=71,
        label="⚠️ At Standard Expected – Minor Refinement Needed",
        summary="Mostly ready with small gaps. Can be addressed quickly.",
    ),
    ReadinessBand(
        threshold=50,
        label="❗ Requires Improvement – Needs Refinement",
        summary="Multiple issues present. Not ready for development without rework.",
    ),
    ReadinessBand(
        threshold=0,
        label="🚫 Not Ready – Fundamentally Incomplete",
        summary="Lacks essential components. Requires major revision or clarification.",
    ),
)


class ScoringConfig(_FrozenModel):
    """
    Complete, immutable scoring configuration.

    Usage:
        config = ScoringConfig.from_file("scoring.json")
        analyzer = StoryAnalyzer(config)
    """

    story_format_pattern: str = Field(
        default=r"As (?P<article>an?) (?P<persona>.*), I want (?P<goal>.*), so that (?P<value>.*)",
        description="Case-insensitive pattern capturing article, persona, goal and value (named groups)",
    )
    thresholds: Thresholds = Field(default_factory=Thresholds)
    keywords: KeywordSets = Field(default_factory=KeywordSets)
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    readiness_bands: Tuple[ReadinessBand, ...] = DEFAULT_READINESS_BANDS

    @field_validator("readiness_bands")
    @classmethod
    def _check_bands(cls, bands: Tuple[ReadinessBand, ...]) -> Tuple[ReadinessBand, ...]:
        if not bands:
            raise ValueError("at least one readiness band is required")
        thresholds = [band.threshold for band in bands]
        if thresholds != sorted(thresholds, reverse=True):
            raise ValueError("readiness bands must be ordered by descending threshold")
        if thresholds[-1] != 0:
            raise ValueError("the last readiness band must have threshold 0")
        return bands

    @classmethod
    def from_dict(cls, overrides: Dict[str, Any]) -> "ScoringConfig":
        """Build a config from partial overrides layered on the defaults."""
        merged = _deep_merge(DEFAULT_SCORING_CONFIG.model_dump(), overrides)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            raise ScoringConfigError(f"Invalid scoring configuration: {e}") from e

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ScoringConfig":
        """Load overrides from a JSON file."""
        config_path = Path(path)
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ScoringConfigError(f"Cannot read scoring configuration {config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ScoringConfigError(f"Scoring configuration {config_path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ScoringConfigError(f"Scoring configuration {config_path} must contain a JSON object")

        config = cls.from_dict(data)
        logger.info(f"[CONFIG] Loaded scoring configuration from {config_path}")
        return config


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


DEFAULT_SCORING_CONFIG = ScoringConfig()

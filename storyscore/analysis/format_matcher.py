"""
Story template matching.

Extracts persona, goal and value from stories written as
"As a [persona], I want [goal], so that [value]". Everything downstream
consumes the FormatMatch, never the pattern itself.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern

from storyscore.models.report import FormatMatch
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig


@lru_cache(maxsize=16)
def _compile(pattern: str) -> Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def match_story_format(
    story: str,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> Optional[FormatMatch]:
    """
    Match a story against the canonical template.

    Args:
        story: Story text
        config: Scoring configuration holding the template pattern. Named groups
            persona, goal and value (and optionally article) are used when present,
            otherwise the first three groups.

    Returns:
        FormatMatch, or None when the story does not follow the template
    """
    match = _compile(config.story_format_pattern).search(story)
    if not match or len(match.groups()) < 3:
        return None

    named = match.groupdict()
    if {"persona", "goal", "value"} <= named.keys():
        persona, goal, value = named["persona"], named["goal"], named["value"]
    else:
        persona, goal, value = match.group(1, 2, 3)
    article = (named.get("article") or "a").lower()

    return FormatMatch(article=article, persona=persona, goal=goal, value=value)

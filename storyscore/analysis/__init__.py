"""Rule-based story scoring engine."""

from storyscore.analysis.story_analyzer import StoryAnalyzer, analyze_story

__all__ = ["StoryAnalyzer", "analyze_story"]

"""
StoryScore - heuristic clarity and INVEST scoring for user stories.
"""

__version__ = "1.0.0"

"""
Request metrics for the StoryScore API.
"""

from .metrics import PerformanceMetrics, get_metrics

__all__ = [
    'PerformanceMetrics',
    'get_metrics',
]

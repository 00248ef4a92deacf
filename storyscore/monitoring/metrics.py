"""
Performance metrics for the API layer.
Tracks analysis timings and failures per operation.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, List, Optional


class PerformanceMetrics:
    """
    Tracks timings and error counts per operation.
    """

    def __init__(self):
        """Initialize metrics tracker."""
        self.timings: Dict[str, List[float]] = {}
        self.errors: Dict[str, int] = {}
        self.start_time = time.time()

    def record_timing(self, operation: str, duration: float):
        """
        Record timing for an operation.

        Args:
            operation: Operation name
            duration: Duration in seconds
        """
        self.timings.setdefault(operation, []).append(duration)

    def record_error(self, operation: str):
        """Record an error for an operation."""
        self.errors[operation] = self.errors.get(operation, 0) + 1

    @contextmanager
    def track(self, operation: str):
        """
        Context manager to track operation timing.

        Usage:
            with metrics.track('analyze_story'):
                report = analyzer.analyze(story, acs)
        """
        start = time.perf_counter()
        try:
            yield
        except Exception:
            self.record_error(operation)
            raise
        finally:
            self.record_timing(operation, time.perf_counter() - start)

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Get statistics for one operation, or for all of them.
        """
        if operation:
            return self._get_operation_stats(operation)
        return {op: self._get_operation_stats(op) for op in self.timings}

    def _get_operation_stats(self, operation: str) -> Dict[str, Any]:
        timings = self.timings.get(operation)
        if not timings:
            return {
                'count': 0,
                'total_time': 0,
                'avg_time': 0,
                'min_time': 0,
                'max_time': 0,
                'errors': self.errors.get(operation, 0)
            }

        total_time = sum(timings)
        return {
            'count': len(timings),
            'total_time': round(total_time, 4),
            'avg_time': round(total_time / len(timings), 4),
            'min_time': round(min(timings), 4),
            'max_time': round(max(timings), 4),
            'errors': self.errors.get(operation, 0)
        }

    def get_summary(self) -> Dict[str, Any]:
        """Overall summary plus per-operation statistics."""
        return {
            'total_operations': sum(len(t) for t in self.timings.values()),
            'uptime_seconds': round(time.time() - self.start_time, 3),
            'total_errors': sum(self.errors.values()),
            'operations': self.get_stats(),
        }

    def reset(self):
        """Reset all metrics."""
        self.timings.clear()
        self.errors.clear()
        self.start_time = time.time()


# Global metrics instance
_metrics_instance: Optional[PerformanceMetrics] = None


def get_metrics() -> PerformanceMetrics:
    """
    Get global metrics instance (singleton).
    """
    global _metrics_instance
    if _metrics_instance is None:
        _metrics_instance = PerformanceMetrics()
    return _metrics_instance

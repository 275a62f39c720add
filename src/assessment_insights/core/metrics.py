"""
Metrics Collection Utilities

Per-record execution metrics for the extraction element and the batch runner.
"""

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, Optional


def _empty_counters() -> Dict[str, Any]:
    return {
        "count": 0,
        "success": 0,
        "total_ms": 0.0,
        "max_ms": 0.0,
        "total_attempts": 0,
        "last_error": None,
    }


class MetricsCollector:
    """
    Collect execution counters grouped by component name.

    Only running totals are kept, so memory stays constant however many
    records a batch holds. Updates come from coroutines on one event loop
    and need no lock.
    """

    def __init__(self, name: str = "pipeline"):
        self.name = name
        self.metrics: Dict[str, Dict[str, Any]] = defaultdict(_empty_counters)
        self.start_time: Optional[datetime] = None
        self.end_time: Optional[datetime] = None

    def start(self) -> None:
        """Mark start of execution."""
        self.start_time = datetime.now()

    def stop(self) -> None:
        """Mark end of execution."""
        self.end_time = datetime.now()

    def record(
        self,
        node_name: str,
        duration_ms: float,
        status: str,
        details: Optional[Dict] = None,
    ) -> None:
        """
        Record one execution.

        Args:
            node_name: Component identifier
            duration_ms: Execution time in milliseconds
            status: "success" or "error"
            details: Optional additional details (attempts, error)
        """
        details = details or {}
        counters = self.metrics[node_name]
        counters["count"] += 1
        if status == "success":
            counters["success"] += 1
        counters["total_ms"] += duration_ms
        counters["max_ms"] = max(counters["max_ms"], duration_ms)
        counters["total_attempts"] += details.get("attempts", 0)
        if details.get("error"):
            counters["last_error"] = details["error"]

    def get_summary(self) -> Dict[str, Any]:
        """
        Get per-component statistics.

        Returns:
            Dict of name -> count, success/error counts, timings, attempts
        """
        summary = {}
        for node_name, counters in self.metrics.items():
            count = counters["count"]
            summary[node_name] = {
                "count": count,
                "success": counters["success"],
                "error": count - counters["success"],
                "avg_ms": counters["total_ms"] / count if count else 0,
                "max_ms": counters["max_ms"],
                "total_attempts": counters["total_attempts"],
                "success_rate": counters["success"] / count if count else 0,
                "last_error": counters["last_error"],
            }
        return summary

    @property
    def total_duration_ms(self) -> float:
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds() * 1000
        return 0.0

"""Performance metrics collection for index builds and searches."""

from collections import defaultdict, deque
from dataclasses import dataclass
import time


@dataclass
class OperationMetrics:
    """Metrics for one engine operation."""

    operation: str
    latency_ms: float
    result_count: int = 0
    query_terms: int = 0


class MetricsCollector:
    """Lightweight metrics collector for engine operations."""

    def __init__(self, window_size: int = 1000, slow_threshold_ms: float = 10.0):
        self.window_size = window_size
        self.slow_threshold_ms = slow_threshold_ms
        self._metrics: deque[OperationMetrics] = deque(maxlen=window_size)
        self._counters: defaultdict[str, int] = defaultdict(int)

    @staticmethod
    def start_timer() -> float:
        return time.perf_counter()

    @staticmethod
    def elapsed_ms(started: float) -> float:
        return (time.perf_counter() - started) * 1000

    def record(self, metrics: OperationMetrics):
        """Record one operation."""
        self._metrics.append(metrics)
        self._counters[f"total_{metrics.operation}"] += 1

        if metrics.latency_ms > self.slow_threshold_ms:
            self._counters[f"slow_{metrics.operation}"] += 1
        if metrics.operation == "search" and metrics.result_count == 0:
            self._counters["empty_search"] += 1

    def get_stats(self, operation: str = "search") -> dict:
        """Get latency and result statistics for one operation type."""
        samples = [m for m in self._metrics if m.operation == operation]
        if not samples:
            return {}

        latencies = sorted(m.latency_ms for m in samples)
        result_counts = [m.result_count for m in samples]
        total = self._counters[f"total_{operation}"]

        return {
            "count": len(samples),
            "latency": {
                "mean": sum(latencies) / len(latencies),
                "p95": latencies[int(len(latencies) * 0.95)],
                "max": latencies[-1],
            },
            "results": {
                "mean": sum(result_counts) / len(result_counts),
                "empty_rate": self._counters[f"empty_{operation}"] / total,
            },
            "performance": {
                "slow_rate": self._counters[f"slow_{operation}"] / total,
                f"total_{operation}": total,
            },
        }

    def reset(self):
        """Reset all metrics."""
        self._metrics.clear()
        self._counters.clear()


# Global metrics collector instance
_metrics_collector = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector."""
    return _metrics_collector

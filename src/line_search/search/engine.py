"""In-memory line search engine.

``SearchEngine`` hides tokenization, the TF-IDF table and ranking behind two
calls: ``build_index`` replaces everything the engine knows and ``search``
returns the best matching lines for a free-text query.

The engine performs no locking. Callers sharing one instance across threads
must serialize ``build_index`` against ``search`` themselves.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from line_search.config import Settings
from line_search.observability.tracing import maybe_span
from line_search.search.analyzers import unique_terms
from line_search.search.metrics import MetricsCollector, OperationMetrics, get_metrics_collector
from line_search.search.models import IndexSnapshot, IndexStats, RankedLine
from line_search.search.ranker import rank
from line_search.search.relevance_index import build_snapshot


logger = logging.getLogger(__name__)


def _settings_from_environment() -> Settings:
    """Read ``LINE_SEARCH_*`` settings, falling back to defaults when they do not validate."""
    try:
        return Settings()
    except ValidationError as exc:
        logger.warning("Ignoring invalid LINE_SEARCH_* settings: %s", exc)
        return Settings.model_construct()


class SearchEngine:
    """Index a text line by line and rank its lines against queries."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.settings = settings or _settings_from_environment()
        self.metrics = metrics or get_metrics_collector()
        self._snapshot = IndexSnapshot.empty()

    def build_index(self, text: str) -> None:
        """Replace the whole index with one built from ``text``.

        Lines are split on ``\\n``; empty segments are dropped and lines with
        no alphabetic words are kept only as zero-scoring placeholders.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        started = self.metrics.start_timer()
        with maybe_span(self.settings.tracing_enabled, "line_search.build_index", {"text.length": len(text)}):
            snapshot = build_snapshot(text)
        # single assignment so a reader sees either the old or the new index
        self._snapshot = snapshot
        latency_ms = self.metrics.elapsed_ms(started)

        self.metrics.record(OperationMetrics(operation="build", latency_ms=latency_ms))
        logger.debug(
            "Index rebuilt",
            extra={
                "line_count": snapshot.line_count,
                "ignored_count": len(snapshot.ignored),
                "vocabulary_size": len(snapshot.vocabulary),
                "latency_ms": round(latency_ms, 3),
            },
        )

    def search_ranked(self, query: str, results_count: int) -> list[RankedLine]:
        """Return up to ``results_count`` matching lines with positions and scores.

        Args:
            query: Free-text query; words are matched without regard to case
            results_count: Maximum number of lines to return

        Returns:
            Lines with a nonzero score, best first. Equal scores put the
            later line first.
        """
        if not isinstance(query, str):
            raise TypeError(f"query must be str, got {type(query).__name__}")
        if results_count < 0:
            raise ValueError(f"results_count must be >= 0, got {results_count}")

        snapshot = self._snapshot
        started = self.metrics.start_timer()
        with maybe_span(
            self.settings.tracing_enabled,
            "line_search.search",
            {"query.length": len(query), "results_count": results_count},
        ):
            results = rank(snapshot, query, results_count)
        latency_ms = self.metrics.elapsed_ms(started)

        query_terms = len(unique_terms(query))
        self.metrics.record(
            OperationMetrics(
                operation="search",
                latency_ms=latency_ms,
                result_count=len(results),
                query_terms=query_terms,
            )
        )
        logger.debug(
            "Search completed",
            extra={
                "query_terms": query_terms,
                "result_count": len(results),
                "latency_ms": round(latency_ms, 3),
            },
        )
        return results

    def search(self, query: str, results_count: int) -> list[str]:
        """Return the text of up to ``results_count`` best matching lines."""
        return [entry.text for entry in self.search_ranked(query, results_count)]

    def stats(self) -> IndexStats:
        return IndexStats.from_snapshot(self._snapshot)

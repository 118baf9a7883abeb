"""Query scoring and ordering over a built relevance table."""

from __future__ import annotations

from functools import cmp_to_key

from line_search.search.analyzers import unique_terms
from line_search.search.models import IndexSnapshot, RankedLine


# Scores closer than this are treated as tied
SCORE_EPSILON = 1e-9


def _compare_ranked(lhs: RankedLine, rhs: RankedLine) -> int:
    """Order by score descending; ties go to the later line."""

    if abs(lhs.score - rhs.score) < SCORE_EPSILON:
        return rhs.position - lhs.position
    return -1 if lhs.score > rhs.score else 1


def score_lines(snapshot: IndexSnapshot, query: str) -> list[RankedLine]:
    """Return one entry per indexed line with the summed query relevance.

    Query terms are deduplicated case-insensitively; terms outside the
    vocabulary contribute nothing. Lines without tokens are skipped.
    """

    columns = [
        snapshot.relevance[term.key] for term in unique_terms(query) if term.key in snapshot.relevance
    ]
    scored: list[RankedLine] = []
    for line in snapshot.lines:
        if line.position in snapshot.ignored:
            continue
        score = 0.0
        for column in columns:
            score += column[line.position]
        scored.append(RankedLine(position=line.position, text=line.text, score=score))
    return scored


def rank(snapshot: IndexSnapshot, query: str, results_count: int) -> list[RankedLine]:
    """Return at most ``results_count`` lines with a nonzero score, best first."""

    if results_count == 0 or snapshot.is_empty():
        return []

    ordered = sorted(score_lines(snapshot, query), key=cmp_to_key(_compare_ranked))

    results: list[RankedLine] = []
    for entry in ordered:
        if len(results) >= results_count or entry.score == 0.0:
            break
        results.append(entry)
    return results

"""TF-IDF relevance table builder."""

from __future__ import annotations

from array import array
from collections import defaultdict
import logging
from types import MappingProxyType

from line_search.search.analyzers import split_lines, tokenize
from line_search.search.models import IndexSnapshot
from line_search.search.stats import calculate_idf, term_frequencies, tf_idf
from line_search.search.vocabulary import Vocabulary


logger = logging.getLogger(__name__)


def build_snapshot(text: str) -> IndexSnapshot:
    """Index ``text`` line by line and return the complete relevance table.

    Every term in the vocabulary gets a dense score sequence with one slot
    per line. Lines without tokens stay in the sequence as zero slots so a
    line position can be used directly as an offset.
    """

    lines = split_lines(text)
    if not lines:
        return IndexSnapshot.empty()

    line_count = len(lines)
    ignored: set[int] = set()
    # term key -> [(line position, tf), ...] for lines where the term occurs
    postings: dict[str, list[tuple[int, float]]] = defaultdict(list)

    for line in lines:
        tokens = tokenize(line.text)
        if not tokens:
            ignored.add(line.position)
            continue
        for key, tf in term_frequencies(tokens).items():
            postings[key].append((line.position, tf))

    vocabulary = Vocabulary.from_text(text)
    relevance: dict[str, array[float]] = {}
    for key in vocabulary:
        line_postings = postings.get(key, [])
        idf = calculate_idf(len(line_postings), line_count)
        scores = array("d", [0.0]) * line_count
        for position, tf in line_postings:
            scores[position] = tf_idf(tf, idf)
        relevance[key] = scores

    logger.debug(
        "Built relevance table",
        extra={
            "line_count": line_count,
            "ignored_count": len(ignored),
            "vocabulary_size": len(vocabulary),
        },
    )

    return IndexSnapshot(
        lines=tuple(lines),
        vocabulary=vocabulary.spellings(),
        relevance=MappingProxyType(relevance),
        ignored=frozenset(ignored),
    )

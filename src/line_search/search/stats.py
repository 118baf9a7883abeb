"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index layout so they can be unit
tested on plain values before being wired into the index builder.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
import math

from line_search.search.analyzers import Token


def term_frequencies(tokens: Sequence[Token]) -> dict[str, float]:
    """Return raw-count term frequency per lowercase key.

    A term occurring twice in a four-token line gets ``0.5``. An empty token
    list yields an empty mapping.
    """

    if not tokens:
        return {}
    counts = Counter(token.key for token in tokens)
    total = len(tokens)
    return {key: count / total for key, count in counts.items()}


def calculate_idf(doc_freq: int, line_count: int) -> float:
    """Return ``ln(line_count / doc_freq)``, or zero when the term never occurs.

    ``line_count`` includes lines without tokens, so a term present in every
    indexed line still scores above zero when such lines exist.
    """

    if doc_freq <= 0 or line_count <= 0:
        return 0.0
    return math.log(line_count / doc_freq)


def tf_idf(tf: float, idf: float) -> float:
    return tf * idf

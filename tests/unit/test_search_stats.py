"""Unit tests for TF-IDF stats helpers."""

from __future__ import annotations

import math

import pytest

from line_search.search.analyzers import tokenize
from line_search.search.stats import calculate_idf, term_frequencies, tf_idf


def test_term_frequencies_use_raw_counts() -> None:
    tf = term_frequencies(tokenize("cat cat dog fish"))

    assert tf == {"cat": 0.5, "dog": 0.25, "fish": 0.25}


def test_term_frequencies_merge_case_variants() -> None:
    tf = term_frequencies(tokenize("Cat cat"))

    assert tf == {"cat": 1.0}


def test_term_frequencies_of_empty_line() -> None:
    assert term_frequencies([]) == {}


def test_calculate_idf_is_natural_log_ratio() -> None:
    assert calculate_idf(doc_freq=2, line_count=3) == pytest.approx(math.log(1.5))
    assert calculate_idf(doc_freq=1, line_count=10) > calculate_idf(doc_freq=5, line_count=10) > 0


def test_calculate_idf_is_zero_when_term_in_every_line() -> None:
    assert calculate_idf(doc_freq=4, line_count=4) == 0.0


def test_calculate_idf_without_occurrences() -> None:
    assert calculate_idf(doc_freq=0, line_count=5) == 0.0
    assert calculate_idf(doc_freq=0, line_count=0) == 0.0


def test_tf_idf_multiplies() -> None:
    assert tf_idf(0.5, 2.0) == 1.0

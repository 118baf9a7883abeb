"""Unit tests for the case-insensitive vocabulary."""

from __future__ import annotations

from line_search.search.analyzers import tokenize
from line_search.search.vocabulary import Vocabulary


def test_from_text_orders_keys_case_insensitively() -> None:
    vocabulary = Vocabulary.from_text("banana Apple cherry apple BANANA")

    assert list(vocabulary) == ["apple", "banana", "cherry"]
    assert len(vocabulary) == 3


def test_prefix_orders_before_longer_term() -> None:
    vocabulary = Vocabulary.from_text("cats Cat catalog ca")

    assert list(vocabulary) == ["ca", "cat", "catalog", "cats"]


def test_first_spelling_is_kept() -> None:
    vocabulary = Vocabulary.from_text("Apple apple APPLE")

    assert vocabulary.spellings() == ("Apple",)


def test_spellings_follow_key_order() -> None:
    vocabulary = Vocabulary(tokenize("Search engine INDEX search"))

    assert vocabulary.spellings() == ("engine", "INDEX", "Search")


def test_empty_vocabulary() -> None:
    vocabulary = Vocabulary.from_text("123 ... 456")

    assert len(vocabulary) == 0
    assert list(vocabulary) == []
    assert vocabulary.spellings() == ()

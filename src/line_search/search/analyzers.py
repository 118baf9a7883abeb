"""Tokenizer utilities for the line search engine.

Text is handled in two passes: ``split_lines`` cuts the corpus on newlines and
``AlphaTokenizer`` pulls alphabetic runs out of a span. Token text keeps the
original casing; ``Token.key`` is the lowercase form used for every equality
and ordering decision.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
import re
from typing import Protocol

from line_search.search.models import Line


@dataclass
class Token:
    """Represents a word token found in a text span."""

    text: str
    position: int
    start_char: int
    end_char: int

    @property
    def key(self) -> str:
        """Case-insensitive comparison key."""
        return self.text.lower()


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class AlphaTokenizer:
    """Yields maximal runs of ASCII letters; everything else is a delimiter."""

    _ALPHA_PATTERN = re.compile(r"[A-Za-z]+")

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self._ALPHA_PATTERN.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class UniqueFilter:
    """Drops tokens whose case-insensitive key was already emitted."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        seen: set[str] = set()
        for token in tokens:
            key = token.key
            if key in seen:
                continue
            seen.add(key)
            yield token


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


def split_lines(text: str) -> list[Line]:
    """Split ``text`` on newlines, dropping zero-length segments.

    Positions count only the materialized lines, so ``"a\\n\\nb"`` yields
    ``a`` at 0 and ``b`` at 1. Lines made only of delimiters (``"  42 "``)
    are kept; the index decides whether they carry any tokens.
    """

    if not text:
        return []
    segments = [segment for segment in text.split("\n") if segment]
    return [Line(position=position, text=segment) for position, segment in enumerate(segments)]


_word_analyzer = AnalyzerPipeline(AlphaTokenizer())
_term_analyzer = AnalyzerPipeline(AlphaTokenizer(), [UniqueFilter()])


def tokenize(text: str) -> list[Token]:
    """Return every word token of ``text`` in order, duplicates included."""
    return _word_analyzer(text)


def unique_terms(text: str) -> list[Token]:
    """Return the first occurrence of each distinct word of ``text``."""
    return _term_analyzer(text)

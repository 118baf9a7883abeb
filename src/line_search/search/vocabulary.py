"""Case-insensitive ordered vocabulary."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from line_search.search.analyzers import Token, unique_terms


class Vocabulary:
    """Ordered set of distinct terms compared without regard to case.

    Terms are keyed by their lowercase form; the spelling of the first
    occurrence is kept for display. Iteration follows lexicographic order of
    the keys, which puts a prefix ahead of every longer term that extends it.
    """

    __slots__ = ("_spellings", "_ordered_keys")

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        spellings: dict[str, str] = {}
        for token in tokens:
            spellings.setdefault(token.key, token.text)
        self._spellings = spellings
        self._ordered_keys = tuple(sorted(spellings))

    @classmethod
    def from_text(cls, text: str) -> Vocabulary:
        return cls(unique_terms(text))

    def __len__(self) -> int:
        return len(self._ordered_keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered_keys)

    def spellings(self) -> tuple[str, ...]:
        return tuple(self._spellings[key] for key in self._ordered_keys)

"""Search data models."""

from __future__ import annotations

from array import array
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Line:
    """A non-empty newline-delimited slice of the indexed text."""

    position: int
    text: str


@dataclass(frozen=True)
class RankedLine:
    """Represents a scored line produced by the ranker."""

    position: int
    text: str
    score: float


@dataclass(frozen=True)
class IndexSnapshot:
    """Immutable state produced by one index build.

    ``relevance`` maps a lowercase term key to one score per line in
    ``lines``; positions listed in ``ignored`` hold zero in every sequence.
    """

    lines: tuple[Line, ...] = ()
    vocabulary: tuple[str, ...] = ()
    relevance: Mapping[str, array[float]] = field(default_factory=lambda: MappingProxyType({}))
    ignored: frozenset[int] = frozenset()

    @classmethod
    def empty(cls) -> IndexSnapshot:
        return cls()

    def is_empty(self) -> bool:
        return not self.lines

    @property
    def line_count(self) -> int:
        return len(self.lines)


class IndexStats(BaseModel):
    """Size summary for the currently indexed corpus."""

    model_config = ConfigDict(frozen=True)

    line_count: int = Field(default=0, ge=0)
    indexed_line_count: int = Field(default=0, ge=0)
    ignored_line_count: int = Field(default=0, ge=0)
    vocabulary_size: int = Field(default=0, ge=0)

    @classmethod
    def from_snapshot(cls, snapshot: IndexSnapshot) -> IndexStats:
        return cls(
            line_count=snapshot.line_count,
            indexed_line_count=snapshot.line_count - len(snapshot.ignored),
            ignored_line_count=len(snapshot.ignored),
            vocabulary_size=len(snapshot.vocabulary),
        )

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator

from mdtoc.models.heading import HeadingTree

MARKDOWN_MAX_HEADING_DEPTH = 6
MARKDOWN_HEADING_MARKER = "#"

Source = str | Iterable[str]


@dataclass(slots=True)
class TOCBuilderConfig:
    """Configuration for turning documents into heading trees."""

    max_depth: int = MARKDOWN_MAX_HEADING_DEPTH
    marker: str = MARKDOWN_HEADING_MARKER

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MARKDOWN_MAX_HEADING_DEPTH:
            raise ValueError(f"max_depth must be between 1 and {MARKDOWN_MAX_HEADING_DEPTH}")
        if len(self.marker) != 1:
            raise ValueError("marker must be a single character")


class TOCBuilder(ABC):
    """Abstract base class for turning documents into HeadingTree outlines."""

    def __init__(self, config: TOCBuilderConfig | None = None) -> None:
        self.config = config or TOCBuilderConfig()

    @abstractmethod
    def build(self, source: Source) -> HeadingTree | None:
        """Parse a single document; return None when it has no headings."""

    def build_many(self, sources: Iterable[Source]) -> Iterator[HeadingTree | None]:
        """Utility for parsing multiple independent documents."""

        for source in sources:
            yield self.build(source)


__all__ = [
    "MARKDOWN_HEADING_MARKER",
    "MARKDOWN_MAX_HEADING_DEPTH",
    "Source",
    "TOCBuilder",
    "TOCBuilderConfig",
]

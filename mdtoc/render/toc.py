from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from mdtoc.models.heading import HeadingTree

logger = logging.getLogger(__name__)

GENERATED_COMMENT = "<!-- gotoc generated table of contents -->"
DEFAULT_INDENT = "\t"


@dataclass(slots=True)
class TOCRendererConfig:
    """Formatting options for the rendered table of contents."""

    indent: str = DEFAULT_INDENT
    generated_comment: str = GENERATED_COMMENT


def format_anchor(text: str) -> str:
    """Turn a heading name into its in-document link target.

    Lower-cases the text, doubles every dash, turns spaces into dashes and
    then drops everything before the first letter.
    """

    slug = text.lower().replace("-", "--").replace(" ", "-")
    for index, char in enumerate(slug):
        if char.isalpha():
            return slug[index:]
    return ""


@dataclass(slots=True)
class HeadingCounter:
    """Occurrences of each heading name seen during one render pass."""

    counts: Dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def suffix_for(self, title: str) -> str:
        """Return the anchor suffix for ``title`` and record this occurrence."""

        seen = self.counts[title]
        self.counts[title] = seen + 1
        return f"-{seen}" if seen else ""


class TOCRenderer:
    """Render a HeadingTree as a nested markdown list of anchor links."""

    def __init__(self, config: TOCRendererConfig | None = None) -> None:
        self.config = config or TOCRendererConfig()

    def render_lines(self, tree: HeadingTree | None) -> List[str]:
        if tree is None:
            return []

        counter = HeadingCounter()
        lines: List[str] = []
        for node, level in tree.walk():
            title = node.title
            anchor = format_anchor(title) + counter.suffix_for(title)
            lines.append(f"{self.config.indent * level}* [{title}](#{anchor})\n")
        return lines

    def render(self, tree: HeadingTree | None) -> str:
        lines = self.render_lines(tree)
        if not lines:
            return ""

        comment = self.config.generated_comment
        logger.debug("Rendered table of contents", extra={"entries": len(lines)})
        return f"\n{comment}\n{''.join(lines)}\n{comment}\n"


def render(tree: HeadingTree | None, config: TOCRendererConfig | None = None) -> str:
    """Render one tree with a fresh renderer."""

    return TOCRenderer(config).render(tree)


__all__ = [
    "DEFAULT_INDENT",
    "GENERATED_COMMENT",
    "HeadingCounter",
    "TOCRenderer",
    "TOCRendererConfig",
    "format_anchor",
    "render",
]

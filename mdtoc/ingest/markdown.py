from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from mdtoc.errors import DepthBelowRoot, MultipleRootHeadings, NoParentAvailable
from mdtoc.ingest.toc_builder import Source, TOCBuilder, TOCBuilderConfig
from mdtoc.ingest.utils import count_markers, iter_lines
from mdtoc.models.heading import HeadingNode, HeadingTree

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ParseState:
    """Per-document state; the path runs from the root to the last attached heading."""

    tree: HeadingTree | None = None
    path: List[HeadingNode] = field(default_factory=list)
    depth: int = 0


class MarkdownTOCBuilder(TOCBuilder):
    """Parse markdown headings (#, ##, ###, ...) into a HeadingTree.

    Headings may skip levels in either direction. A deeper heading is nested
    under the most recent heading; a shallower or equal one is attached to the
    nearest preceding heading that is strictly shallower than it. Only one
    top-level ``#`` heading is allowed per document. When the first heading is
    deeper than ``#``, a synthetic root holds the outline instead. Marker runs
    longer than ``config.max_depth`` are not headings and are skipped.
    """

    def build(self, source: Source) -> HeadingTree | None:
        state = _ParseState()
        marker = self.config.marker

        for line_number, line in enumerate(iter_lines(source), start=1):
            if not line:
                continue

            markers = count_markers(line, marker)
            if markers == 0:
                continue
            if markers > self.config.max_depth:
                logger.debug(
                    "Skipping marker run deeper than max heading depth",
                    extra={"line_number": line_number, "markers": markers},
                )
                continue

            if markers == 1 and state.tree is not None:
                raise MultipleRootHeadings(
                    "unable to parse markdown document with more than one main header '#'",
                    line_number=line_number,
                    line=line,
                )

            node = HeadingNode(depth=markers - 1, name=line[markers:], raw_line=line)

            if state.tree is None:
                self._init_tree(state, node)
                continue

            if node.depth > state.depth:
                parent = state.path[-1]
            else:
                parent = self._climb_path(state, node, line_number)

            parent.add_child(node)
            state.path.append(node)
            state.depth = node.depth

        return state.tree

    def _init_tree(self, state: _ParseState, node: HeadingNode) -> None:
        if node.depth == 0:
            state.tree = HeadingTree(root=node)
        else:
            root = HeadingNode.synthetic_root()
            root.add_child(node)
            state.tree = HeadingTree(root=root)
            state.path.append(root)

        state.path.append(node)
        state.depth = node.depth

    def _climb_path(self, state: _ParseState, node: HeadingNode, line_number: int) -> HeadingNode:
        """Pop the path until its top can parent ``node`` and return that top."""

        assert state.tree is not None
        root_depth = state.tree.root.depth
        if node.depth < root_depth:
            raise DepthBelowRoot(
                f"can not climb path past the root depth: {root_depth}, given: {node.depth}",
                line_number=line_number,
                line=node.raw_line,
            )

        while state.path:
            candidate = state.path[-1]
            if candidate.depth < node.depth:
                logger.debug(
                    "Reparenting heading",
                    extra={"line_number": line_number, "parent_depth": candidate.depth, "depth": node.depth},
                )
                return candidate
            state.path.pop()

        raise NoParentAvailable(
            "unable to find needed parent depth",
            line_number=line_number,
            line=node.raw_line,
        )


def build(source: Source, config: TOCBuilderConfig | None = None) -> HeadingTree | None:
    """Build the heading tree for one document with a fresh builder."""

    return MarkdownTOCBuilder(config).build(source)


__all__ = ["MarkdownTOCBuilder", "build"]

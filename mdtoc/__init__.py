"""Markdown heading outlines and generated tables of contents."""

from .errors import MdTocError, MultipleRootHeadings, StructuralError
from .models.heading import HeadingNode, HeadingTree, NodeKind
from .ingest import MarkdownTOCBuilder, build
from .render import TOCRenderer, format_anchor, render

__all__ = [
    "HeadingNode",
    "HeadingTree",
    "MarkdownTOCBuilder",
    "MdTocError",
    "MultipleRootHeadings",
    "NodeKind",
    "StructuralError",
    "TOCRenderer",
    "build",
    "format_anchor",
    "render",
]

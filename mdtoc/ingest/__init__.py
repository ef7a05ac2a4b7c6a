"""Heading-tree construction from markdown text."""

from .toc_builder import MARKDOWN_MAX_HEADING_DEPTH, TOCBuilder, TOCBuilderConfig
from .markdown import MarkdownTOCBuilder, build
from .utils import count_markers

__all__ = [
    "MARKDOWN_MAX_HEADING_DEPTH",
    "MarkdownTOCBuilder",
    "TOCBuilder",
    "TOCBuilderConfig",
    "build",
    "count_markers",
]

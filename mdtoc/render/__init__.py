"""Table-of-contents rendering for heading trees."""

from .toc import (
    DEFAULT_INDENT,
    GENERATED_COMMENT,
    HeadingCounter,
    TOCRenderer,
    TOCRendererConfig,
    format_anchor,
    render,
)

__all__ = [
    "DEFAULT_INDENT",
    "GENERATED_COMMENT",
    "HeadingCounter",
    "TOCRenderer",
    "TOCRendererConfig",
    "format_anchor",
    "render",
]

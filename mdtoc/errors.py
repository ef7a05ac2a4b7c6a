"""Custom exceptions for mdtoc."""

from __future__ import annotations


class MdTocError(Exception):
    """Base exception for mdtoc operations."""


class StructuralError(MdTocError):
    """The heading sequence of a document cannot form a single outline."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MultipleRootHeadings(StructuralError):
    """A second top-level '#' heading was found."""


class DepthBelowRoot(StructuralError):
    """A heading tried to outdent past the depth of the root."""


class NoParentAvailable(StructuralError):
    """No shallower ancestor was left on the parse path."""


class DocumentError(MdTocError):
    """Error resolving or writing a source document."""


class MissingInputError(DocumentError):
    """Neither a path nor inline content was given."""


class ConflictingInputError(DocumentError):
    """Both a path and inline content were given."""


class DocumentNotFoundError(DocumentError):
    """The document path does not exist."""


class EmptyDocumentError(DocumentError):
    """Inline content was empty."""


class TocWriteError(DocumentError):
    """The table of contents could not be written back to the document."""


class ConfigError(MdTocError):
    """A settings file could not be loaded or validated."""


__all__ = [
    "ConfigError",
    "ConflictingInputError",
    "DepthBelowRoot",
    "DocumentError",
    "DocumentNotFoundError",
    "EmptyDocumentError",
    "MdTocError",
    "MissingInputError",
    "MultipleRootHeadings",
    "NoParentAvailable",
    "StructuralError",
    "TocWriteError",
]

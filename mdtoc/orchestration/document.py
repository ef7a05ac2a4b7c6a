from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mdtoc.errors import (
    ConflictingInputError,
    DocumentError,
    DocumentNotFoundError,
    EmptyDocumentError,
    MissingInputError,
)
from mdtoc.ingest.markdown import MarkdownTOCBuilder
from mdtoc.models.configs import TocSettings
from mdtoc.models.heading import HeadingTree
from mdtoc.render.toc import TOCRenderer


@dataclass(slots=True)
class Document:
    """A markdown source given either as a file path or as inline content."""

    path: Path | None = None
    content: str | None = None

    def validate(self) -> None:
        if self.path is not None and self.content is not None:
            raise ConflictingInputError("can not use a document path and inline content at the same time")
        if self.path is None and self.content is None:
            raise MissingInputError("must provide one of a document path or inline content")
        if self.path is not None and not Path(self.path).exists():
            raise DocumentNotFoundError(f"no file found at document path: {self.path}")
        if self.content == "":
            raise EmptyDocumentError("document content is empty")

    def read(self) -> str:
        if self.content is not None:
            return self.content
        assert self.path is not None
        try:
            return Path(self.path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(f"no file found at document path: {self.path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentError(f"unable to open document {self.path}: {exc}") from exc


@dataclass(slots=True)
class TocResult:
    """Summarizes one document conversion."""

    toc: str
    tree: HeadingTree | None
    heading_count: int


def generate_toc(document: Document, settings: TocSettings | None = None) -> TocResult:
    """Build the heading tree of a document and render its table of contents.

    A document without headings produces an empty ``toc`` and no tree.
    Structural errors from the builder propagate unchanged.
    """

    settings = settings or TocSettings()
    document.validate()

    builder = MarkdownTOCBuilder(settings.to_builder_config())
    tree = builder.build(document.read())
    if tree is None:
        return TocResult(toc="", tree=None, heading_count=0)

    toc = TOCRenderer(settings.to_renderer_config()).render(tree)
    return TocResult(toc=toc, tree=tree, heading_count=len(tree))


__all__ = ["Document", "TocResult", "generate_toc"]

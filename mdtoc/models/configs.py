from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mdtoc.ingest.toc_builder import MARKDOWN_MAX_HEADING_DEPTH, TOCBuilderConfig
from mdtoc.render.toc import DEFAULT_INDENT, GENERATED_COMMENT, TOCRendererConfig


class TocSettings(BaseModel):
    """User-facing options shared by the CLI, the server and config files."""

    indent: str = Field(default=DEFAULT_INDENT, description="Indent unit per nesting level")
    generated_comment: str = Field(default=GENERATED_COMMENT, min_length=1)
    max_heading_depth: int = Field(default=MARKDOWN_MAX_HEADING_DEPTH, ge=1, le=MARKDOWN_MAX_HEADING_DEPTH)

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("generated_comment")
    @classmethod
    def _single_line_comment(cls, value: str) -> str:
        if "\n" in value:
            raise ValueError("generated_comment must fit on a single line")
        return value

    def to_builder_config(self) -> TOCBuilderConfig:
        return TOCBuilderConfig(max_depth=self.max_heading_depth)

    def to_renderer_config(self) -> TOCRendererConfig:
        return TOCRendererConfig(indent=self.indent, generated_comment=self.generated_comment)


__all__ = ["TocSettings"]

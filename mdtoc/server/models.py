from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from mdtoc.models.heading import HeadingNode


class TocRequest(BaseModel):
    content: str = Field(description="Markdown document text")


class OutlineEntry(BaseModel):
    title: str
    depth: int
    children: List["OutlineEntry"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: HeadingNode) -> "OutlineEntry":
        return cls(
            title=node.title,
            depth=node.depth,
            children=[cls.from_node(child) for child in node.children],
        )


class TocResponse(BaseModel):
    toc: str
    heading_count: int
    outline: List[OutlineEntry] = Field(default_factory=list)


__all__ = ["OutlineEntry", "TocRequest", "TocResponse"]

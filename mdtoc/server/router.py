from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from mdtoc.errors import ConfigError, EmptyDocumentError, StructuralError
from mdtoc.models.configs import TocSettings
from mdtoc.orchestration.document import Document, generate_toc
from mdtoc.server.settings import Settings, get_settings, get_toc_settings
from .models import OutlineEntry, TocRequest, TocResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/toc", tags=["toc"])


def resolve_toc_settings() -> TocSettings:
    try:
        return get_toc_settings()
    except ConfigError as exc:
        logger.error("Invalid server TOC settings", extra={"error": str(exc)})
        raise HTTPException(status_code=500, detail=f"Server misconfigured: {exc}") from exc


@router.post("", response_model=TocResponse)
def create_toc(
    payload: TocRequest,
    settings: Settings = Depends(get_settings),
    toc_settings: TocSettings = Depends(resolve_toc_settings),
) -> TocResponse:
    if len(payload.content) > settings.max_content_chars:
        raise HTTPException(status_code=413, detail="Document too large")

    try:
        result = generate_toc(Document(content=payload.content), toc_settings)
    except EmptyDocumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StructuralError as exc:
        logger.info("Rejected document", extra={"error": str(exc), "line_number": exc.line_number})
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    outline: list[OutlineEntry] = []
    if result.tree is not None:
        root = result.tree.root
        nodes = root.children if root.is_synthetic else [root]
        outline = [OutlineEntry.from_node(node) for node in nodes]

    return TocResponse(toc=result.toc, heading_count=result.heading_count, outline=outline)


__all__ = ["router"]

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from mdtoc.errors import DocumentError, DocumentNotFoundError, TocWriteError
from mdtoc.ingest.toc_builder import MARKDOWN_HEADING_MARKER
from mdtoc.ingest.utils import count_markers
from mdtoc.render.toc import GENERATED_COMMENT

logger = logging.getLogger(__name__)


def _split_lines(text: str) -> List[str]:
    """Split on line feeds only, keeping the terminators."""

    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _strip_generated_block(lines: List[str], comment: str) -> List[str]:
    """Remove a previously generated table of contents, if there is one."""

    marks = [index for index, line in enumerate(lines) if line.strip() == comment]
    if len(marks) < 2:
        return lines

    start, end = marks[0], marks[1]
    # the block opens with a blank line of its own
    if start > 0 and not lines[start - 1].strip():
        start -= 1
    return lines[:start] + lines[end + 1 :]


def _find_root_heading(lines: List[str]) -> int | None:
    for index, line in enumerate(lines):
        if count_markers(line.strip(), MARKDOWN_HEADING_MARKER) == 1:
            return index
    return None


def insert_toc(path: Path, toc: str, *, generated_comment: str = GENERATED_COMMENT) -> bool:
    """Write ``toc`` into the file right after its first top-level heading.

    Returns False and leaves the file untouched when the file has no ``#``
    heading. A table of contents generated by an earlier run is replaced.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DocumentNotFoundError(f"no file found at document path: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"unable to read {path}: {exc}") from exc

    lines = _strip_generated_block(_split_lines(text), generated_comment)
    index = _find_root_heading(lines)
    if index is None:
        logger.info("No top-level heading found, table of contents not written", extra={"path": str(path)})
        return False

    heading = lines[index]
    if not heading.endswith("\n"):
        heading += "\n"
    contents = "".join(lines[:index]) + heading + toc + "".join(lines[index + 1 :])

    try:
        path.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise TocWriteError(f"unable to write to file {path}: {exc}") from exc

    logger.info("Wrote table of contents", extra={"path": str(path), "heading_line": index + 1})
    return True


__all__ = ["insert_toc"]

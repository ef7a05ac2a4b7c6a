from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from mdtoc.errors import MdTocError
from mdtoc.models.configs import TocSettings
from mdtoc.orchestration import Document, generate_toc, insert_toc, load_settings

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(
        prog="mdtoc",
        description="Generate a linked table of contents from markdown headings.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--text",
        help="Generate the table of contents from an input string. Can not be combined with --file.",
    )
    source.add_argument("--file", type=Path, help="Path to a markdown file to generate the table of contents from.")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--print",
        dest="write",
        action="store_false",
        help="Only print the table of contents (default).",
    )
    mode.add_argument(
        "--write",
        dest="write",
        action="store_true",
        help=(
            "Write the table of contents into --file right after its top-level '#' heading. "
            "If no such heading is found the file is left untouched."
        ),
    )
    parser.set_defaults(write=False)

    parser.add_argument(
        "--config",
        type=Path,
        default=os.getenv("MDTOC_CONFIG") or None,
        help="Optional settings file (YAML, TOML or JSON). Defaults to $MDTOC_CONFIG.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.write and args.file is None:
        parser.error("--write requires --file")
    return args


def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.config) if args.config else TocSettings()
    document = Document(path=args.file, content=args.text)
    result = generate_toc(document, settings)

    if result.tree is None:
        logger.warning("No headings found in document")

    if not args.write:
        print(result.toc)
        return 0

    if insert_toc(args.file, result.toc, generated_comment=settings.generated_comment):
        print(f"Wrote table of contents with {result.heading_count} entries to {args.file}")
    else:
        print(f"No top-level heading found in {args.file}; nothing written")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args)
    except MdTocError as exc:
        print(f"mdtoc: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

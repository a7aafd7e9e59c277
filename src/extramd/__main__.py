"""CLI entry point for extramd.

Usage:
    python -m extramd render <document.json> [--raw] [--json]
    python -m extramd compress <file.md | ->
    python -m extramd glossary <document.json>
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

from extramd.compressor import compress
from extramd.config import get_settings
from extramd.converter import render_document
from extramd.glossary import extract_glossary


def _load_document(path: Path) -> dict[str, Any]:
    raw: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    return raw


async def cmd_render(args: argparse.Namespace) -> int:
    """Render a saved Docs API document to Markdown."""
    path = Path(args.document)
    label = str(path)
    settings = get_settings()
    try:
        raw = _load_document(path)
        label = raw.get("documentId") or label
        result = await render_document(raw, settings=settings)
    except Exception as e:
        print(f"Error: {label}: {e}", file=sys.stderr)
        return 1

    if not args.raw:
        result.markdown = compress(
            result.markdown, shrink_embeds_over=settings.embed_shrink_threshold
        )
    if args.json:
        print(json.dumps(dataclasses.asdict(result), indent=2, ensure_ascii=False))
    else:
        print(result.markdown)
    return 0


async def cmd_compress(args: argparse.Namespace) -> int:
    """Compress a Markdown file."""
    try:
        if args.file == "-":
            markdown = sys.stdin.read()
        else:
            markdown = Path(args.file).read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: {args.file}: {e}", file=sys.stderr)
        return 1
    print(compress(markdown), end="")
    return 0


async def cmd_glossary(args: argparse.Namespace) -> int:
    """Print the glossary table of a saved document as JSON."""
    path = Path(args.document)
    label = str(path)
    try:
        raw = _load_document(path)
        label = raw.get("documentId") or label
        entries = extract_glossary(raw)
    except Exception as e:
        print(f"Error: {label}: {e}", file=sys.stderr)
        return 1

    records = [dataclasses.asdict(entry) for entry in entries]
    print(json.dumps(records, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="extramd",
        description="Convert Google Docs answer documents to Markdown",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Render a document JSON file to Markdown",
    )
    render_parser.add_argument(
        "document",
        help="Path to a Google Docs API document (JSON)",
    )
    render_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the Markdown without compressing it",
    )
    render_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result (Markdown, related documents, suggestions)",
    )
    render_parser.set_defaults(func=cmd_render)

    # compress subcommand
    compress_parser = subparsers.add_parser(
        "compress",
        help="Normalise whitespace of a Markdown file",
    )
    compress_parser.add_argument(
        "file",
        help="Markdown file, or - for stdin",
    )
    compress_parser.set_defaults(func=cmd_compress)

    # glossary subcommand
    glossary_parser = subparsers.add_parser(
        "glossary",
        help="Print the glossary table of a document as JSON",
    )
    glossary_parser.add_argument(
        "document",
        help="Path to a Google Docs API document (JSON)",
    )
    glossary_parser.set_defaults(func=cmd_glossary)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    result: int = asyncio.run(args.func(args))
    return result


if __name__ == "__main__":
    sys.exit(main())

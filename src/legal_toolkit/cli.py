#!/usr/bin/env python3
"""
Legal Draft Toolkit command line interface.

Usage:
    # List clauses with their provenance
    legal-toolkit review draft.txt --key-terms "rent 50000 monthly"

    # Same, as JSON for a review UI
    legal-toolkit review draft.txt --key-terms "rent 50000 monthly" --json

    # Render to PDF, dropping clauses 2 and 5
    legal-toolkit render draft.txt -o rent.pdf --title "Rent Agreement" --exclude 2,5

    # Render without anything the classifier flagged, keep the layout artifact
    legal-toolkit render draft.txt -o rent.pdf --exclude-model-added --layout-json rent.json
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import FrozenSet, List, Optional

from legal_toolkit import __version__
from legal_toolkit.builder import BuildError, BuilderConfig, build_document
from legal_toolkit.core import ValidationError, dump_json, serialize_clauses, serialize_layout
from legal_toolkit.review import segment_document

logger = logging.getLogger("legal_toolkit.cli")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def parse_indices(value: str) -> FrozenSet[int]:
    """Parse a comma-separated list of clause indices ("2,5")."""
    indices = set()
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            index = int(part)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a clause index: {part!r}") from None
        if index < 0:
            raise argparse.ArgumentTypeError(f"clause index must be non-negative: {index}")
        indices.add(index)
    return frozenset(indices)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legal-toolkit",
        description="Review and paginate generated legal documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("input", type=Path, help="Generated document text file ('-' for stdin)")
        p.add_argument("--key-terms", default="", help="User's key terms field")
        p.add_argument("--extra-notes", default="", help="User's additional notes field")

    review = sub.add_parser("review", help="List clauses with provenance labels")
    add_common(review)
    review.add_argument("--json", action="store_true", help="Print the clause artifact as JSON")

    render = sub.add_parser("render", help="Render the document to PDF")
    add_common(render)
    render.add_argument("-o", "--output", type=Path, required=True, help="Output PDF path")
    render.add_argument("--title", default="", help="Document title (default: Legal Document)")
    render.add_argument("--exclude", type=parse_indices, default=frozenset(),
                        help="Comma-separated clause indices to drop")
    render.add_argument("--exclude-model-added", action="store_true",
                        help="Drop every clause flagged as model-added")
    render.add_argument("--layout-json", type=Path, help="Also write the layout artifact as JSON")

    return parser


def _read_input(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _run_review(args: argparse.Namespace) -> int:
    clauses = segment_document(_read_input(args.input), args.key_terms, args.extra_notes)

    if args.json:
        print(json.dumps(serialize_clauses(clauses), indent=2, ensure_ascii=False))
        return 0

    for clause in clauses:
        marker = "AI " if clause.is_model_added else "   "
        patterns = f"  [{', '.join(clause.matched_patterns)}]" if clause.matched_patterns else ""
        print(f"{clause.sequence_index:>3} {marker} {clause.first_line[:70]}{patterns}")
    return 0


def _run_render(args: argparse.Namespace) -> int:
    config = BuilderConfig(
        title=args.title,
        key_terms=args.key_terms,
        extra_notes=args.extra_notes,
        excluded=args.exclude,
        exclude_model_added=args.exclude_model_added,
        output_path=args.output,
    )
    result = build_document(_read_input(args.input), config)

    if args.layout_json:
        dump_json(serialize_layout(result.layout), args.layout_json)
        logger.info(f"Wrote layout artifact to {args.layout_json}")

    print(f"{result.pdf_path}: {result.page_count} pages, "
          f"{len(result.clauses) - len(result.excluded)}/{len(result.clauses)} clauses")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        if args.command == "review":
            return _run_review(args)
        return _run_render(args)
    except (BuildError, ValidationError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

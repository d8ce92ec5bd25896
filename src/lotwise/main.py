#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from lotwise import __version__
from lotwise.adapters.visibility import InMemoryDashboardVisibility
from lotwise.app import build_session
from lotwise.common.logging import configure_logging
from lotwise.domain.model import ItemRecord

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from lotwise.app import ItemAnalysis


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lotwise", description="Analyse an auction item against market data"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Analyse one item from a JSON file")
    analyze.add_argument(
        "item_json",
        type=Path,
        metavar="ITEM_JSON",
        help="Path to a JSON document with the item fields ('-' reads stdin)",
    )
    analyze.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )
    analyze.add_argument(
        "--ai-artist",
        type=str,
        help="Artist name detected by an AI pass",
    )
    visibility = analyze.add_mutually_exclusive_group()
    visibility.add_argument(
        "--show-dashboard",
        dest="dashboard",
        action="store_const",
        const=True,
        help="Treat the market dashboard as visible (lookup runs immediately)",
    )
    visibility.add_argument(
        "--hide-dashboard",
        dest="dashboard",
        action="store_const",
        const=False,
        help="Treat the market dashboard as hidden (lookup is deferred)",
    )
    return parser.parse_args(list(argv))


def _load_item(path: Path) -> ItemRecord:
    try:
        raw = sys.stdin.read() if str(path) == "-" else path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read item file {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Item file is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Item file must contain a JSON object")
    return ItemRecord.from_mapping(data)


def _print_analysis(analysis: ItemAnalysis) -> None:
    print(f"Query: {analysis.query} ({analysis.analysis_type})")
    print("Terms:")
    for term in analysis.display_terms:
        marker = "x" if term.is_selected else " "
        print(f"  [{marker}] {term.term} ({term.type})")

    if analysis.snapshot is None:
        print("Market: deferred until the dashboard is opened")
    elif not analysis.snapshot.has_comparable_data:
        print(f"Market: no comparable data ({analysis.snapshot.data_source})")
    for note in analysis.market_notes:
        print(f"  {note.field}: {note.message}")

    if analysis.valuation:
        print("Valuation:")
        for suggestion in analysis.valuation:
            print(f"  [{suggestion.severity}] {suggestion.field}: {suggestion.message}")

    if analysis.brand_issues:
        print("Brand spelling:")
        for issue in analysis.brand_issues:
            print(
                f"  {issue.original_brand} -> {issue.suggested_brand} "
                f"({issue.confidence:.0%}, {issue.source})"
            )

    print(f"Search: {analysis.urls.all}")


def _run_analysis(args: argparse.Namespace, item: ItemRecord) -> None:
    visibility = (
        InMemoryDashboardVisibility(visible=args.dashboard) if args.dashboard is not None else None
    )
    session = build_session(visibility=visibility)
    analysis = session.analyze(item, ai_artist=args.ai_artist)
    _print_analysis(analysis)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(argv or sys.argv[1:])
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        item = _load_item(parsed_args.item_json)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        _run_analysis(parsed_args, item)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load `.env` from the working directory, then run."""
    load_dotenv(find_dotenv(usecwd=True))
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

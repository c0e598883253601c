"""
argos-search — command line tool.

Usage:
  argos-search <ArgosExport.xml> [searchTermsCsv] [extractSql]

Examples:
  argos-search export.xml
  argos-search export.xml "SSN,BIRTH_DATE" Y
  argos-search export.xml SSN -o results/ssn.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from argos_search import __version__
from argos_search.api.search import BlockSearch
from argos_search.config import get_app_config
from argos_search.models.requests import SearchRequest

console = Console(soft_wrap=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argos-search",
        description="Search DataBlocks of an Argos export and list their reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"argos-search {__version__}"
    )
    parser.add_argument(
        "input_path",
        help="Argos export file (XML, literal or HTML-escaped)",
    )
    parser.add_argument(
        "search_terms",
        nargs="?",
        default=None,
        help="Comma-separated search terms; omit to list every DataBlock",
    )
    parser.add_argument(
        "extract_sql",
        nargs="?",
        default=None,
        help="Y to append the original <Data> lines of each match",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Report file (default: SearchMatches.txt)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scanner decisions at DEBUG level",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_app_config().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    request = SearchRequest.from_cli(args.search_terms, args.extract_sql)

    try:
        _configure_logging(args.verbose)
        outcome = BlockSearch().run(args.input_path, request, args.output)
    except FileNotFoundError:
        console.print(f"File not found: {escape(args.input_path)}")
        return 1
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    console.print(
        f"[green]{outcome.matched_blocks}[/green] of {outcome.total_blocks} "
        f"data blocks matched. See {escape(str(outcome.output_path))} for results."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

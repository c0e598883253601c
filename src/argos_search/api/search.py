"""
High-level pipeline for searching Argos exports.

BlockSearch coordinates the complete workflow:
- Read the export file into memory
- Scan DataBlocks and their Reports
- Filter by search terms
- Write the SearchMatches report

Design Philosophy:
- Fail fast on user errors (missing or undecodable input) before scanning
- Tolerate structurally broken exports (handled inside the scanner)
- Return statistics instead of printing them
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from argos_search.config import AppConfig, ScannerConfig, get_app_config, get_scanner_config
from argos_search.models.requests import SearchRequest
from argos_search.parsers.block_scanner import scan_lines
from argos_search.parsers.line_source import read_lines
from argos_search.services.report_writer import ReportWriter

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    """Result of one search run."""
    input_path: Path
    output_path: Path
    total_blocks: int
    matched_blocks: int
    text: str


class BlockSearch:
    """
    Search an Argos export and write the matches report.

    Example:
        >>> search = BlockSearch()
        >>> request = SearchRequest.from_cli("SSN", "Y")
        >>> outcome = search.run("export.xml", request)
        >>> outcome.matched_blocks
        1
    """

    def __init__(
        self,
        app_config: Optional[AppConfig] = None,
        scanner_config: Optional[ScannerConfig] = None
    ):
        self.app_config = app_config or get_app_config()
        self.scanner_config = scanner_config or get_scanner_config()

    def run(
        self,
        input_path: Union[str, Path],
        request: Optional[SearchRequest] = None,
        output_path: Optional[Union[str, Path]] = None
    ) -> SearchOutcome:
        """
        Run the full search.

        Args:
            input_path: Export file to scan
            request: Search terms and SQL-echo flag (default: match everything)
            output_path: Report file (default: AppConfig.output_path)

        Returns:
            SearchOutcome with block counts and report text

        Raises:
            FileNotFoundError: If input_path does not exist
            ValueError: If input_path cannot be decoded
        """
        input_path = Path(input_path)
        request = request or SearchRequest()
        output_path = Path(output_path or self.app_config.output_path)

        lines = read_lines(input_path, self.app_config.input_encodings)
        logger.info(f"Read {len(lines)} lines from {input_path}")

        blocks = scan_lines(lines, self.scanner_config)
        logger.info(f"Found {len(blocks)} data blocks in {input_path}")

        writer = ReportWriter(
            extract_sql=request.extract_sql,
            config=self.scanner_config
        )
        result = writer.write(blocks, request.terms, output_path)

        return SearchOutcome(
            input_path=input_path,
            output_path=output_path,
            total_blocks=len(blocks),
            matched_blocks=result.matched_count,
            text=result.text
        )

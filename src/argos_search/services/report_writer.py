"""
Report Writer Service

Renders matched DataBlocks as the plain-text SearchMatches report:

    DataBlock: <name>
    Reports:
      - <report name>

    SQL:
    <original data line>

Unnamed blocks get positional names counted over the blocks actually
written, so filtered-out blocks do not consume a number.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from argos_search.config import ScannerConfig, get_scanner_config
from argos_search.models.data_block import DataBlock
from argos_search.parsers.block_scanner import final_block_name
from argos_search.parsers.search_matcher import ContentMatcher, create_default_matcher

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of rendering one report."""
    text: str
    matched_count: int
    output_path: Optional[Path] = None


class ReportWriter:
    """
    Formats and writes search results.

    Usage:
        writer = ReportWriter(extract_sql=True)
        result = writer.write(blocks, ['ssn'], 'SearchMatches.txt')
    """

    def __init__(
        self,
        matcher: Optional[ContentMatcher] = None,
        extract_sql: bool = False,
        config: Optional[ScannerConfig] = None
    ):
        """
        Initialize report writer.

        Args:
            matcher: Content matching strategy (default: tag-skipping substring)
            extract_sql: Append verbatim <Data> lines under "SQL:"
            config: Naming rules and fixed texts
        """
        self.matcher = matcher or create_default_matcher()
        self.extract_sql = extract_sql
        self.config = config or get_scanner_config()

    def render(self, blocks: Sequence[DataBlock], terms: Sequence[str]) -> RenderResult:
        """
        Render matched blocks in parse order.

        Args:
            blocks: Scanned DataBlocks
            terms: Case-folded search terms (empty selects everything)

        Returns:
            RenderResult with report text and number of matched blocks
        """
        out: List[str] = []
        matched = 0
        unnamed_counter = 0

        for block in blocks:
            if not self.matcher.matches(block.content_lower, terms):
                continue

            matched += 1
            if self.config.is_placeholder(block.name):
                unnamed_counter += 1
            name = final_block_name(block, unnamed_counter, self.config)

            out.append(f"DataBlock: {name}")
            out.append("Reports:")
            if not block.reports:
                out.append("  (No reports)")
            else:
                out.extend(f"  - {report}" for report in block.reports)
            out.append("")

            if self.extract_sql:
                out.append("SQL:")
                out.extend(block.content_original)
                out.append("")

        if matched == 0:
            out.append(self.config.no_match_message)

        text = "\n".join(out) + "\n"
        return RenderResult(text=text, matched_count=matched)

    def write(
        self,
        blocks: Sequence[DataBlock],
        terms: Sequence[str],
        output_path: Union[str, Path]
    ) -> RenderResult:
        """
        Render and write the report, overwriting any existing file.

        Args:
            blocks: Scanned DataBlocks
            terms: Case-folded search terms
            output_path: Report file path

        Returns:
            RenderResult with output_path set
        """
        result = self.render(blocks, terms)
        output_path = Path(output_path)

        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(result.text)

        logger.info(f"Wrote {result.matched_count} matched blocks to {output_path}")
        result.output_path = output_path
        return result

"""
Recursive-descent scanner for DataBlock/Report nesting in Argos exports.

Key structural rules:
1. Scanning starts at a <Children> scope; content outside any scope is ignored
2. A Report belongs to the nearest enclosing DataBlock, through any
   number of intermediate <Children> wrappers
3. Reports with no enclosing DataBlock are consumed and dropped
4. End of input closes every open element; nothing here raises on
   malformed structure

Ownership is threaded through the recursion as a single `owner`
reference; all DataBlocks live in one flat, append-only list.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from argos_search.config import ScannerConfig, get_scanner_config
from argos_search.models.data_block import DataBlock
from argos_search.parsers import tag_matcher as tags
from argos_search.parsers.line_source import read_lines

logger = logging.getLogger(__name__)


def resolve_block_name(
    current: str,
    candidate: str,
    config: Optional[ScannerConfig] = None
) -> str:
    """
    Apply a <Name> sub-element to a block name.

    The candidate wins only while the current name is empty or a
    placeholder such as "Main"; the first real name sticks.

    Example:
        >>> resolve_block_name('Main', 'Foo')
        'Foo'
        >>> resolve_block_name('Bar', 'Foo')
        'Bar'
    """
    config = config or get_scanner_config()
    if config.is_placeholder(current):
        return candidate
    return current


def final_block_name(
    block: DataBlock,
    unnamed_counter: int,
    config: Optional[ScannerConfig] = None
) -> str:
    """
    Display name of a block, with the positional fallback applied.

    Args:
        block: Scanned block
        unnamed_counter: 1-based counter value to use if the block is unnamed
        config: Scanner configuration

    Returns:
        block.name, or e.g. 'UnnamedDataBlock_3' for empty/placeholder names
    """
    config = config or get_scanner_config()
    if config.is_placeholder(block.name):
        return f"{config.unnamed_block_prefix}{unnamed_counter}"
    return block.name


class BlockScanner:
    """
    Walks a list of lines and collects DataBlock records.

    Usage:
        scanner = BlockScanner(lines)
        blocks = scanner.scan()

    A scanner instance is single-use: scan() consumes its cursor.
    """

    def __init__(self, lines: Sequence[str], config: Optional[ScannerConfig] = None):
        self.lines = lines
        self.config = config or get_scanner_config()
        self.index = 0
        self.blocks: List[DataBlock] = []

    def _has_more(self) -> bool:
        return self.index < len(self.lines)

    def _current(self) -> str:
        return self.lines[self.index]

    def scan(self) -> List[DataBlock]:
        """
        Scan the whole document.

        Returns:
            DataBlocks in the order their opening tags appear
        """
        while self._has_more():
            if tags.is_children_open(self._current()):
                logger.debug(f"Found <Children> at line {self.index}")
                self.index += 1
                self._parse_children(None)
            else:
                self.index += 1

        logger.debug(f"Finished parsing. Found {len(self.blocks)} data blocks total.")
        return self.blocks

    def _parse_children(self, owner: Optional[DataBlock]) -> None:
        """
        Scan a <Children> scope until its close tag or end of input.

        Args:
            owner: DataBlock that owns reports found in this scope, or None
                   at document top level
        """
        while self._has_more():
            line = self._current()

            if tags.is_children_close(line):
                logger.debug(f"Found </Children> at line {self.index}, leaving scope")
                self.index += 1
                return

            if tags.is_datablock_open(line):
                self._parse_datablock()
            elif tags.is_report_open(line):
                report_name = self._parse_report()
                if owner is not None:
                    logger.debug(f"Linking report '{report_name}' to block '{owner.name}'")
                    owner.add_report(report_name)
                else:
                    logger.debug(f"Dropping report '{report_name}' outside any DataBlock")
            elif tags.is_children_open(line):
                logger.debug(f"Found nested <Children> at line {self.index}")
                self.index += 1
                self._parse_children(owner)
            else:
                self.index += 1

    def _parse_datablock(self) -> DataBlock:
        """
        Scan one DataBlock: opening line, body, then nested scopes.

        The block is appended before its body is scanned so that a block
        cut off by end of input is still kept.
        """
        logger.debug(f"Found <DataBlock> at line {self.index}")
        open_line = self._current()
        self.index += 1

        block = DataBlock()
        self.blocks.append(block)

        attribute_name = tags.extract_name_attribute(open_line)
        if attribute_name is not None:
            block.name = attribute_name
            logger.debug(f'DataBlock with attribute Name="{block.name}"')

        self._parse_body(block)

        # Tail: nested scopes until </DataBlock>
        while self._has_more():
            line = self._current()
            if tags.is_datablock_close(line):
                logger.debug(f"Found </DataBlock> at line {self.index}, finishing block '{block.name}'")
                self.index += 1
                break
            elif tags.is_children_open(line):
                logger.debug(f"Found <Children> inside block '{block.name}'")
                self.index += 1
                self._parse_children(block)
            else:
                self.index += 1

        return block

    def _parse_body(self, block: DataBlock) -> None:
        """
        Collect name sub-elements and <Data> content of a DataBlock.

        Stops without consuming at </DataBlock>, <Children> or <Report>
        (outside <Data>), or at end of input.
        """
        inside_data = False

        while self._has_more():
            line = self._current()

            sub_name = tags.extract_name_element(line)
            if sub_name is not None:
                logger.debug(f"Found sub-element <Name>: '{sub_name}' at line {self.index}")
                block.name = resolve_block_name(block.name, sub_name, self.config)
            elif tags.is_data_open(line):
                inside_data = True
            elif tags.is_data_close(line):
                inside_data = False
            elif inside_data:
                block.add_content_line(line)
            elif (tags.is_datablock_close(line)
                  or tags.is_children_open(line)
                  or tags.is_report_open(line)):
                break

            self.index += 1

        logger.debug(
            f"Parsed DataBlock body => name='{block.name}', "
            f"lines={len(block.content_original)}"
        )

    def _parse_report(self) -> str:
        """
        Consume a Report element and return its name.

        Reads to </Report> or end of input. A self-closing `<Report .../>`
        is complete on its own line.
        """
        open_line = self._current()
        self.index += 1

        report_name = tags.extract_name_attribute(open_line)
        if not report_name:
            report_name = self.config.unnamed_report_name

        if tags.is_self_closing(open_line):
            return report_name

        while self._has_more():
            if tags.is_report_close(self._current()):
                self.index += 1
                return report_name
            self.index += 1

        logger.debug(f"Did not find </Report> for '{report_name}' before end of input")
        return report_name


def scan_lines(
    lines: Iterable[str],
    config: Optional[ScannerConfig] = None
) -> List[DataBlock]:
    """
    Extract DataBlocks from an in-memory document.

    Args:
        lines: Document lines in order
        config: Scanner configuration (defaults to get_scanner_config())

    Returns:
        DataBlocks in document order

    Example:
        >>> blocks = scan_lines([
        ...     '<Children>',
        ...     '<DataBlock Name="Payroll">',
        ...     '<Children>',
        ...     '<Report Name="Checks"/>',
        ...     '</Children>',
        ...     '</DataBlock>',
        ...     '</Children>',
        ... ])
        >>> blocks[0].name, blocks[0].reports
        ('Payroll', ['Checks'])
    """
    return BlockScanner(list(lines), config).scan()


def scan_file(
    path: Union[str, Path],
    config: Optional[ScannerConfig] = None,
    encodings: Optional[Sequence[str]] = None
) -> List[DataBlock]:
    """
    Read an export file and extract its DataBlocks.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be decoded
    """
    return scan_lines(read_lines(path, encodings), config)

"""
Line classification for Argos export tags.

Argos exports embed the report definition either as literal XML or
HTML-entity-escaped inside another document, so every tag may appear
as `<Tag` or `&lt;Tag`. All predicates go through `is_tag()`, which
owns that alternation.

Matching is line-granular: a tag split across two physical lines is
not recognized.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern


_OPEN = r'(<|&lt;)'
_CLOSE = r'(>|&gt;)'

NAME_ATTRIBUTE_PATTERN = re.compile(r'Name\s*=\s*"([^"]*)"', re.IGNORECASE)

NAME_ELEMENT_PATTERN = re.compile(
    rf'^{_OPEN}Name{_CLOSE}([^<]+){_OPEN}/Name{_CLOSE}',
    re.IGNORECASE
)


@lru_cache(maxsize=None)
def _tag_pattern(tag: str, closing: bool) -> Pattern[str]:
    """
    Compile the pattern for an opening or closing tag.

    Opening forms may be followed by whitespace (attributes), `>` or `&gt;`;
    closing forms must be followed directly by `>` or `&gt;`.
    """
    if closing:
        return re.compile(rf'^{_OPEN}/{re.escape(tag)}{_CLOSE}', re.IGNORECASE)
    return re.compile(rf'^{_OPEN}{re.escape(tag)}(\s|>|&gt;)', re.IGNORECASE)


def is_tag(line: str, tag: str, closing: bool = False) -> bool:
    """
    Check whether a line starts with the given tag.

    Args:
        line: Raw or trimmed line; leading whitespace is ignored
        tag: Tag name without brackets (e.g., 'DataBlock')
        closing: Match `</Tag>` instead of `<Tag ...`

    Returns:
        True if the line starts with the tag in literal or escaped form

    Example:
        >>> is_tag('  <DataBlock Name="Main">', 'DataBlock')
        True
        >>> is_tag('&lt;/Children&gt;', 'Children', closing=True)
        True
        >>> is_tag('<DataBlock>', 'Data')
        False
    """
    return _tag_pattern(tag, closing).match(line.lstrip()) is not None


def is_children_open(line: str) -> bool:
    return is_tag(line, 'Children')


def is_children_close(line: str) -> bool:
    return is_tag(line, 'Children', closing=True)


def is_datablock_open(line: str) -> bool:
    return is_tag(line, 'DataBlock')


def is_datablock_close(line: str) -> bool:
    return is_tag(line, 'DataBlock', closing=True)


def is_report_open(line: str) -> bool:
    return is_tag(line, 'Report')


def is_report_close(line: str) -> bool:
    return is_tag(line, 'Report', closing=True)


def is_self_closing(line: str) -> bool:
    """True for a single-line element such as `<Report Name="X"/>`."""
    stripped = line.rstrip()
    return stripped.endswith('/>') or stripped.endswith('/&gt;')


def is_data_open(line: str) -> bool:
    return is_tag(line, 'Data')


def is_data_close(line: str) -> bool:
    return is_tag(line, 'Data', closing=True)


def extract_name_attribute(line: str) -> Optional[str]:
    """
    Extract the double-quoted `Name="..."` value from an opening tag line.

    This is not an attribute parser: it looks for the first `Name=`
    followed by a double-quoted value anywhere on the line.

    Args:
        line: Raw (untrimmed) opening tag line

    Returns:
        Trimmed attribute value, or None if absent

    Example:
        >>> extract_name_attribute('<DataBlock Name=" Payroll " Type="x">')
        'Payroll'
    """
    match = NAME_ATTRIBUTE_PATTERN.search(line)
    if match is None:
        return None
    return match.group(1).strip()


def extract_name_element(line: str) -> Optional[str]:
    """
    Extract the value of a single-line `<Name>value</Name>` sub-element.

    Args:
        line: Raw line; leading whitespace is ignored

    Returns:
        Trimmed element text, or None if the line is not a Name element

    Example:
        >>> extract_name_element('&lt;Name&gt;Employee Deductions&lt;/Name&gt;')
        'Employee Deductions'
    """
    match = NAME_ELEMENT_PATTERN.match(line.lstrip())
    if match is None:
        return None
    return match.group(3).strip()

"""
argos-search: DataBlock and Report extraction for Argos report exports.

Main package exports for user-facing API.
"""

__version__ = "0.1.0"

from argos_search.api import BlockSearch, SearchOutcome
from argos_search.models import DataBlock, SearchRequest
from argos_search.parsers import scan_file, scan_lines, matches_search

__all__ = [
    'BlockSearch',
    'SearchOutcome',
    'DataBlock',
    'SearchRequest',
    'scan_file',
    'scan_lines',
    'matches_search',
]

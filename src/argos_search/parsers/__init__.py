"""
Line-based parsing modules for Argos report exports.

- Tags may be literal (<Tag>) or HTML-entity-escaped (&lt;Tag&gt;)
- Nesting is recovered by recursive descent over <Children> scopes
- Reports attach to the nearest enclosing DataBlock
- Search skips tag lines captured inside <Data>
"""

from .line_source import read_lines
from .block_scanner import (
    BlockScanner,
    scan_lines,
    scan_file,
    resolve_block_name,
    final_block_name,
)
from .search_matcher import (
    ContentMatcher,
    TagSkippingSubstringMatcher,
    create_default_matcher,
    matches_search,
)

__all__ = [
    # Line source
    'read_lines',
    # Scanning
    'BlockScanner',
    'scan_lines',
    'scan_file',
    'resolve_block_name',
    'final_block_name',
    # Matching Strategies
    'ContentMatcher',
    'TagSkippingSubstringMatcher',
    'create_default_matcher',
    'matches_search',
]

"""
Content Matching Strategies

Decides whether a DataBlock's <Data> content satisfies a set of search
terms. Lines that begin with a tag (`<` or `&lt;`) are fragments of the
export markup captured inside <Data>, not content, and never match.

Design:
- Strategy Pattern: matchers are interchangeable
- Report writer is agnostic to the matching strategy
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Sequence

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r'[\r\n]+')

TAG_LINE_PREFIXES = ('<', '&lt;')


class ContentMatcher(ABC):
    """
    Abstract base class for content matching strategies.
    """

    @abstractmethod
    def matches(self, content_lower: str, terms: Sequence[str]) -> bool:
        """
        Test block content against search terms.

        Args:
            content_lower: Case-folded, newline-joined <Data> content
            terms: Case-folded search terms

        Returns:
            True if the block is selected
        """
        pass


class TagSkippingSubstringMatcher(ContentMatcher):
    """
    Substring matching over content lines, skipping tag lines.

    No terms selects everything. Otherwise the first content line
    containing any term decides the match.

    Example:
        >>> matcher = TagSkippingSubstringMatcher()
        >>> matcher.matches('<condition>ssn</condition>', ['ssn'])
        False
        >>> matcher.matches('ssn_details some text', ['ssn'])
        True
    """

    def matches(self, content_lower: str, terms: Sequence[str]) -> bool:
        if not terms:
            return True

        for line_no, line in enumerate(_LINE_BREAKS.split(content_lower)):
            if not line:
                continue

            line = line.lstrip()
            if line.startswith(TAG_LINE_PREFIXES):
                continue

            for term in terms:
                if term in line:
                    logger.debug(f"MATCH for '{term}' in line {line_no}: {line}")
                    return True

        return False


def create_default_matcher() -> ContentMatcher:
    """
    Create default matching strategy.

    Returns:
        TagSkippingSubstringMatcher
    """
    return TagSkippingSubstringMatcher()


def matches_search(content_lower: str, terms: Sequence[str]) -> bool:
    """Match content with the default strategy."""
    return create_default_matcher().matches(content_lower, terms)

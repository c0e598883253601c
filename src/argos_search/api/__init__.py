"""
User-facing API for argos-search.
"""

from argos_search.api.search import BlockSearch, SearchOutcome

__all__ = [
    'BlockSearch',
    'SearchOutcome',
]

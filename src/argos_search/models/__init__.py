"""
Pydantic models for extracted records and search requests.
"""

from argos_search.models.data_block import DataBlock
from argos_search.models.requests import SearchRequest

__all__ = [
    'DataBlock',
    'SearchRequest',
]

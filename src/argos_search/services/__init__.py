"""
Service layer for rendering search results.
"""

from argos_search.services.report_writer import ReportWriter, RenderResult

__all__ = [
    'ReportWriter',
    'RenderResult',
]

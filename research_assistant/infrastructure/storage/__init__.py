"""Storage infrastructure module."""

from .memory_document_index import InMemoryDocumentIndex
from .memory_report_repository import InMemoryReportRepository

__all__ = ['InMemoryDocumentIndex', 'InMemoryReportRepository']

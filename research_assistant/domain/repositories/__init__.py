"""Repository interfaces package."""

from .document_repository import DocumentRepository
from .report_repository import ReportRepository
from .llm_repository import LLMRepository

__all__ = [
    'DocumentRepository',
    'ReportRepository',
    'LLMRepository'
]

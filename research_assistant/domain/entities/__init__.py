"""Domain entities package."""

from .document import Document, DocumentMetadata, DocumentUpload, SearchResult, ResultType
from .report import Report, ReportStatus
from .billing import CreditTransaction, TransactionStatus, UsageSummary

__all__ = [
    'Document',
    'DocumentMetadata',
    'DocumentUpload',
    'SearchResult',
    'ResultType',
    'Report',
    'ReportStatus',
    'CreditTransaction',
    'TransactionStatus',
    'UsageSummary'
]

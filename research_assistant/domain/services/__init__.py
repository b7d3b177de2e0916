"""Domain services package."""

from .search_service import SearchService
from .ingestion_service import IngestionService
from .report_service import ReportService
from .billing_service import BillingService
from .answer_service import AnswerService

__all__ = [
    'SearchService',
    'IngestionService',
    'ReportService',
    'BillingService',
    'AnswerService'
]

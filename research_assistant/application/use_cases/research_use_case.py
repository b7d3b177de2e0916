"""Research use case: search, report and credit accounting."""

from typing import Any, Dict, List, Optional, Sequence

from ...config import REPORT_CREDIT_COST, SEARCH_CREDIT_COST
from ...domain.entities import Report, SearchResult
from ...domain.repositories import DocumentRepository
from ...domain.services import BillingService, ReportService, SearchService
from ...exceptions import ValidationError


class ResearchUseCase:
    """Use case for running research queries and saving reports."""

    def __init__(
        self,
        search_service: SearchService,
        report_service: ReportService,
        billing_service: BillingService,
        document_repository: DocumentRepository,
        search_cost: int = SEARCH_CREDIT_COST,
        report_cost: int = REPORT_CREDIT_COST
    ):
        self._search_service = search_service
        self._report_service = report_service
        self._billing_service = billing_service
        self._document_repo = document_repository
        self._search_cost = search_cost
        self._report_cost = report_cost

    def search(self, query: str, document_ids: Optional[Sequence[int]] = None) -> Dict[str, Any]:
        """Search the given documents, or every indexed one when none are given."""
        if not query or not query.strip():
            raise ValidationError(message="Missing query")

        if document_ids is None:
            document_ids = [doc.id for doc in self._document_repo.all()]

        results = self._search_service.search(query, list(document_ids))
        balance = self._billing_service.record_query(self._search_cost)
        return {
            "query": query,
            "results": [r.to_dict() for r in results],
            "credits": balance,
        }

    def create_report(self, query: str, results: List[SearchResult], title: Optional[str] = None) -> Report:
        report = self._report_service.create(query, results, title=title)
        self._billing_service.record_report(self._report_cost)
        return report

"""Report domain service."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..entities import Report, ReportStatus, SearchResult
from ..repositories import ReportRepository
from ...exceptions import ReportError, ValidationError
from ...logging_config import get_logger

logger = get_logger(__name__)


class ReportService:
    """Domain service for saving reviewed search results as reports."""

    def __init__(self, report_repository: ReportRepository):
        self._report_repo = report_repository

    def create(self, query: str, results: Sequence[SearchResult], title: Optional[str] = None) -> Report:
        if not query or not query.strip():
            raise ValidationError(message="Report query cannot be empty")
        query = query.strip()

        report = Report(
            id=self._report_repo.next_id(),
            title=title.strip() if title and title.strip() else f"Research Report: {query}",
            query=query,
            results=tuple(results),
            generated_at=datetime.now(timezone.utc),
            status=ReportStatus.COMPLETED,
        )
        self._report_repo.add(report)
        logger.info(f"Created report {report.id} with {len(report.results)} results")
        return report

    def get(self, report_id: int) -> Report:
        report = self._report_repo.get(report_id)
        if report is None:
            raise ReportError(
                message=f"Report {report_id} not found",
                error_code="ReportNotFound",
                details={"report_id": report_id}
            )
        return report

    def list(self) -> List[Report]:
        return self._report_repo.list()

    def search(self, text: str) -> List[Report]:
        """Reports whose title or query contains ``text``, case-insensitively."""
        needle = text.lower()
        return [r for r in self._report_repo.list()
                if needle in r.title.lower() or needle in r.query.lower()]

    def delete(self, report_id: int) -> bool:
        return self._report_repo.delete(report_id)

    def export_markdown(self, report_id: int) -> str:
        report = self.get(report_id)
        lines = [
            f"# {report.title}",
            "",
            f"**Query:** {report.query}",
            f"**Generated:** {report.generated_at:%Y-%m-%d %H:%M} UTC",
            f"**Status:** {report.status.value}",
            "",
        ]
        for number, result in enumerate(report.results, start=1):
            lines.append(f"## {number}. {result.title}")
            lines.append("")
            lines.append(f"> {result.snippet}")
            lines.append("")
            location = result.source
            if result.page_number is not None:
                location += f", p. {result.page_number}"
            lines.append(f"- Source: {location} ({result.type.value})")
            lines.append(f"- Relevance: {result.relevance:.0%}")
            if result.citations:
                lines.append(f"- Citations: {', '.join(result.citations)}")
            lines.append("")
        return "\n".join(lines)

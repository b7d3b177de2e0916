"""Report domain entities."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Tuple

from .document import SearchResult


class ReportStatus(Enum):
    """Lifecycle of a report."""
    PROCESSING = "processing"
    COMPLETED = "completed"


@dataclass
class Report:
    """A query bundled with the results the user chose to keep."""
    id: int
    title: str
    query: str
    results: Tuple[SearchResult, ...]
    generated_at: datetime
    status: ReportStatus = ReportStatus.COMPLETED

    def __post_init__(self) -> None:
        if not self.query.strip():
            raise ValueError("Report query cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "query": self.query,
            "results": [r.to_dict() for r in self.results],
            "generatedAt": self.generated_at.isoformat(),
            "status": self.status.value,
        }

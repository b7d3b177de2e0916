"""In-memory report storage."""

import itertools
import threading
from typing import List, Optional

from ...domain.entities import Report
from ...domain.repositories import ReportRepository


class InMemoryReportRepository(ReportRepository):
    """Append-only report list, newest first."""

    def __init__(self):
        self._reports: List[Report] = []
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def add(self, report: Report) -> None:
        with self._lock:
            self._reports.insert(0, report)

    def get(self, report_id: int) -> Optional[Report]:
        with self._lock:
            return next((r for r in self._reports if r.id == report_id), None)

    def list(self) -> List[Report]:
        with self._lock:
            return list(self._reports)

    def delete(self, report_id: int) -> bool:
        with self._lock:
            for position, report in enumerate(self._reports):
                if report.id == report_id:
                    del self._reports[position]
                    return True
        return False

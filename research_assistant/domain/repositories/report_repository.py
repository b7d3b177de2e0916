"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Report


class ReportRepository(ABC):
    """Abstract interface for report storage."""

    @abstractmethod
    def next_id(self) -> int:
        pass

    @abstractmethod
    def add(self, report: Report) -> None:
        pass

    @abstractmethod
    def get(self, report_id: int) -> Optional[Report]:
        pass

    @abstractmethod
    def list(self) -> List[Report]:
        """Reports newest first."""
        pass

    @abstractmethod
    def delete(self, report_id: int) -> bool:
        pass

"""Credit ledger entities."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class TransactionStatus(Enum):
    COMPLETED = "completed"
    PENDING = "pending"


@dataclass(frozen=True)
class CreditTransaction:
    """One movement on the credit balance; negative credits are charges."""
    id: int
    date: datetime
    description: str
    credits: int
    status: TransactionStatus = TransactionStatus.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "credits": self.credits,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class UsageSummary:
    total_queries: int
    total_reports: int
    credits_used: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalQueries": self.total_queries,
            "totalReports": self.total_reports,
            "creditsUsed": self.credits_used,
        }

"""Credit ledger: a balance with a transaction log."""

import itertools
import threading
from datetime import datetime, timezone
from typing import List

from ..entities import CreditTransaction, UsageSummary
from ...exceptions import ValidationError
from ...logging_config import get_logger

logger = get_logger(__name__)


class BillingService:
    """Tracks research credits. The balance never drops below zero."""

    def __init__(self, initial_credits: int = 0):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._balance = max(0, initial_credits)
        self._history: List[CreditTransaction] = []
        self._total_queries = 0
        self._total_reports = 0
        self._credits_used = 0

    @property
    def balance(self) -> int:
        return self._balance

    def charge(self, amount: int, description: str) -> int:
        """Deduct credits and return the new balance."""
        self._check_amount(amount)
        with self._lock:
            deducted = min(amount, self._balance)
            self._balance -= deducted
            self._credits_used += deducted
            self._record(description, -deducted)
            balance = self._balance
        logger.info(f"Charged {deducted} credits ({description}); balance {balance}")
        return balance

    def add_credits(self, amount: int, description: str = "Credit purchase") -> int:
        self._check_amount(amount)
        with self._lock:
            self._balance += amount
            self._record(description, amount)
            balance = self._balance
        logger.info(f"Added {amount} credits ({description}); balance {balance}")
        return balance

    def record_query(self, cost: int) -> int:
        with self._lock:
            self._total_queries += 1
        return self.charge(cost, "Research query")

    def record_report(self, cost: int) -> int:
        with self._lock:
            self._total_reports += 1
        return self.charge(cost, "Report generation")

    def history(self) -> List[CreditTransaction]:
        """Transactions newest first."""
        with self._lock:
            return list(reversed(self._history))

    def usage(self) -> UsageSummary:
        with self._lock:
            return UsageSummary(self._total_queries, self._total_reports, self._credits_used)

    def _record(self, description: str, credits: int) -> None:
        self._history.append(CreditTransaction(
            id=next(self._ids),
            date=datetime.now(timezone.utc),
            description=description,
            credits=credits,
        ))

    @staticmethod
    def _check_amount(amount: int) -> None:
        if amount <= 0:
            raise ValidationError(
                message="Credit amount must be positive",
                details={"amount": amount}
            )

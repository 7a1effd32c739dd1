"""Checkout policies and late-fee strategies per membership category.

Both are frozen value objects parameterized by their numbers rather than
one class per category. Instances are shared process-wide through the
policy registry and are safe to use from any request.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lendctl.domain.models import Member


@dataclass(frozen=True)
class CheckoutPolicy:
    """How many books a member may hold and for how long."""

    max_books: int
    loan_period_days: int

    def can_checkout(self, member: Member) -> bool:
        """True iff the member is strictly under the book limit."""
        return member.books_checked_out < self.max_books


@dataclass(frozen=True)
class LateFeeStrategy:
    """Linear late fee: ``days_late * daily_rate``.

    A zero rate gives the flat no-fee strategy.
    """

    daily_rate: float

    def calculate_fee(self, days_late: int) -> float:
        """Fee owed for *days_late* whole days, rounded to cents.

        Raises:
            ValueError: If *days_late* is negative.
        """
        if days_late < 0:
            msg = f"days_late must be non-negative, got {days_late}"
            raise ValueError(msg)
        return round(days_late * self.daily_rate, 2)


REGULAR_POLICY = CheckoutPolicy(max_books=3, loan_period_days=14)
PREMIUM_POLICY = CheckoutPolicy(max_books=10, loan_period_days=30)
STUDENT_POLICY = CheckoutPolicy(max_books=5, loan_period_days=21)

REGULAR_LATE_FEE = LateFeeStrategy(daily_rate=0.50)
PREMIUM_LATE_FEE = LateFeeStrategy(daily_rate=0.0)
STUDENT_LATE_FEE = LateFeeStrategy(daily_rate=0.25)


def days_late(due_date: date, today: date) -> int:
    """Whole days between *due_date* and *today* when today is later, else 0.

    Examples:
        >>> days_late(date(2026, 3, 1), date(2026, 3, 6))
        5
        >>> days_late(date(2026, 3, 6), date(2026, 3, 1))
        0
    """
    if today <= due_date:
        return 0
    return today.toordinal() - due_date.toordinal()

"""Tests for checkout policies, late-fee strategies and day counting."""

from datetime import date

import pytest

from lendctl.domain.models import Member
from lendctl.domain.policies import (
    PREMIUM_LATE_FEE,
    PREMIUM_POLICY,
    REGULAR_LATE_FEE,
    REGULAR_POLICY,
    STUDENT_LATE_FEE,
    STUDENT_POLICY,
    CheckoutPolicy,
    days_late,
)


class TestCheckoutPolicy:
    @pytest.mark.parametrize(
        ("policy", "max_books", "loan_days"),
        [
            (REGULAR_POLICY, 3, 14),
            (PREMIUM_POLICY, 10, 30),
            (STUDENT_POLICY, 5, 21),
        ],
        ids=["regular", "premium", "student"],
    )
    def test_limits(self, policy: CheckoutPolicy, max_books: int, loan_days: int) -> None:
        assert policy.max_books == max_books
        assert policy.loan_period_days == loan_days

    def test_allows_checkout_under_limit(self) -> None:
        member = Member(email="test@example.com", name="Test", books_checked_out=2)
        assert REGULAR_POLICY.can_checkout(member)

    def test_blocks_checkout_at_limit(self) -> None:
        member = Member(email="test@example.com", name="Test", books_checked_out=3)
        assert not REGULAR_POLICY.can_checkout(member)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            REGULAR_POLICY.max_books = 99  # type: ignore[misc]


class TestLateFeeStrategy:
    def test_regular_charges_fifty_cents_per_day(self) -> None:
        assert REGULAR_LATE_FEE.calculate_fee(5) == 2.50
        assert REGULAR_LATE_FEE.calculate_fee(10) == 5.00

    def test_premium_charges_nothing(self) -> None:
        assert PREMIUM_LATE_FEE.calculate_fee(5) == 0.0
        assert PREMIUM_LATE_FEE.calculate_fee(100) == 0.0

    def test_student_charges_quarter_per_day(self) -> None:
        assert STUDENT_LATE_FEE.calculate_fee(5) == 1.25
        assert STUDENT_LATE_FEE.calculate_fee(10) == 2.50

    def test_zero_days_is_free(self) -> None:
        assert REGULAR_LATE_FEE.calculate_fee(0) == 0.0

    def test_negative_days_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            REGULAR_LATE_FEE.calculate_fee(-1)


class TestDaysLate:
    def test_after_due_date(self) -> None:
        assert days_late(date(2026, 3, 10), date(2026, 3, 15)) == 5

    def test_on_due_date(self) -> None:
        assert days_late(date(2026, 3, 15), date(2026, 3, 15)) == 0

    def test_before_due_date(self) -> None:
        assert days_late(date(2026, 3, 20), date(2026, 3, 15)) == 0

    def test_across_year_boundary(self) -> None:
        assert days_late(date(2025, 12, 30), date(2026, 1, 2)) == 3

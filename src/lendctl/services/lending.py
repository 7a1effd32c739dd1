"""LendingService — the checkout / return / search / report facade.

Checkout pipeline: RESOLVE → VALIDATE → APPLY (book, then member) → NOTIFY → RESPOND
Return pipeline:   RESOLVE → VALIDATE → ASSESS FEE → APPLY → NOTIFY → RESPOND

Lookup misses raise (``BookNotFound`` / ``MemberNotFound``); business
refusals come back as declined results. Notification runs only after both
writes have completed and can never undo them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lendctl.domain.errors import BookNotFound, MemberNotFound
from lendctl.domain.policies import days_late as compute_days_late
from lendctl.domain.registry import DEFAULT_REGISTRY
from lendctl.domain.types import BookStatus
from lendctl.services._helpers import format_fee, today_utc
from lendctl.services.base import BaseService
from lendctl.services.books import BookService
from lendctl.services.contracts import (
    CheckoutResultData,
    ReportResultData,
    ReturnResultData,
    SearchResultData,
    dump_validated,
)
from lendctl.services.members import MemberService
from lendctl.services.reports import ReportGeneratorFactory
from lendctl.services.result import ServiceError, ServiceResult
from lendctl.services.search import SearchService, parse_search_kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from lendctl.domain.models import Book, Member
    from lendctl.domain.registry import PolicyRegistry
    from lendctl.services._helpers import Clock
    from lendctl.services.ports import LibraryStore, Notifier

logger = logging.getLogger(__name__)

BOOK_UNAVAILABLE = "Book is not available"
CHECKOUT_LIMIT = "Member has reached checkout limit"
NOT_CHECKED_OUT = "Book is not checked out"


def _declined(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


class LendingService(BaseService):
    """Orchestrates a lending transaction over the store and notifier.

    Built once and reused; holds no per-request state.
    """

    def __init__(
        self,
        store: LibraryStore,
        notifier: Notifier,
        *,
        registry: PolicyRegistry = DEFAULT_REGISTRY,
        clock: Clock = today_utc,
    ) -> None:
        super().__init__(store)
        self._notifier = notifier
        self._registry = registry
        self._clock = clock
        self._books = BookService(store)
        self._members = MemberService(store)
        self._search = SearchService(store)
        self._reports = ReportGeneratorFactory(store, clock)

    # ------------------------------------------------------------------
    # checkout
    # ------------------------------------------------------------------

    def checkout_book(self, isbn: str, member_email: str) -> ServiceResult:
        """Lend the book *isbn* to the member *member_email*."""
        op = "checkout"
        warnings: list[str] = []

        # ── RESOLVE ──────────────────────────────────────────
        book = self._require_book(isbn)
        member = self._require_member(member_email)

        # ── VALIDATE ─────────────────────────────────────────
        if not self._books.is_available(book):
            logger.info("Checkout of %s declined: book is %s", isbn, book.status)
            return _declined(op, "BOOK_UNAVAILABLE", BOOK_UNAVAILABLE, isbn=isbn)

        policy = self._registry.policy_for(member.membership_type)
        if not policy.can_checkout(member):
            logger.info(
                "Checkout of %s declined: %s holds %d of %d books",
                isbn,
                member.email,
                member.books_checked_out,
                policy.max_books,
            )
            return _declined(
                op,
                "CHECKOUT_LIMIT",
                CHECKOUT_LIMIT,
                books_checked_out=member.books_checked_out,
                max_books=policy.max_books,
            )

        # ── APPLY ────────────────────────────────────────────
        due_date = self._books.checkout_book(
            book, member, policy.loan_period_days, today=self._clock()
        )
        self._members.increment_checkout_count(member)

        # ── NOTIFY ───────────────────────────────────────────
        self._dispatch_notification(
            "checkout",
            lambda: self._notifier.notify_checkout(member, book, due_date),
            warnings,
        )

        # ── RESPOND ──────────────────────────────────────────
        logger.info("Book %s checked out to %s, due %s", isbn, member.email, due_date)
        return ServiceResult(
            ok=True,
            op=op,
            message=f"Book checked out successfully. Due date: {due_date.isoformat()}",
            data=dump_validated(
                CheckoutResultData,
                {
                    "isbn": book.isbn,
                    "member": member.email,
                    "due_date": due_date,
                    "loan_period_days": policy.loan_period_days,
                },
            ),
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # return
    # ------------------------------------------------------------------

    def return_book(self, isbn: str) -> ServiceResult:
        """Take back the book *isbn*, assessing a late fee when overdue."""
        op = "return"
        warnings: list[str] = []

        # ── RESOLVE / VALIDATE ───────────────────────────────
        book = self._require_book(isbn)
        if book.status != BookStatus.CHECKED_OUT or book.due_date is None:
            logger.info("Return of %s declined: book is %s", isbn, book.status)
            return _declined(op, "NOT_CHECKED_OUT", NOT_CHECKED_OUT, isbn=isbn)

        # A dangling borrower reference is a data-integrity failure.
        member = self._require_member(book.checked_out_by)

        # ── ASSESS FEE ───────────────────────────────────────
        late_days = compute_days_late(book.due_date, self._clock())
        late_fee = 0.0
        if late_days > 0:
            strategy = self._registry.fee_strategy_for(member.membership_type)
            late_fee = strategy.calculate_fee(late_days)

        # ── APPLY ────────────────────────────────────────────
        self._books.return_book(book)
        self._members.decrement_checkout_count(member)

        # ── NOTIFY ───────────────────────────────────────────
        self._dispatch_notification(
            "return",
            lambda: self._notifier.notify_return(member, book, late_fee),
            warnings,
        )

        # ── RESPOND ──────────────────────────────────────────
        if late_fee > 0:
            message = f"Book returned. Late fee: {format_fee(late_fee)}"
        else:
            message = "Book returned successfully"
        logger.info("Book %s returned by %s (%d days late)", isbn, member.email, late_days)
        return ServiceResult(
            ok=True,
            op=op,
            message=message,
            data=dump_validated(
                ReturnResultData,
                {
                    "isbn": book.isbn,
                    "member": member.email,
                    "days_late": late_days,
                    "late_fee": late_fee,
                },
            ),
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # search / report
    # ------------------------------------------------------------------

    def search_books(self, term: str, kind: str) -> ServiceResult:
        """Search the catalog; raises ``InvalidSearchKind`` for unknown kinds."""
        search_kind = parse_search_kind(kind)
        books = self._search.search(term, search_kind)
        return ServiceResult(
            ok=True,
            op="search",
            message=f"{len(books)} book(s) found",
            data=dump_validated(
                SearchResultData,
                {
                    "query": term,
                    "kind": str(search_kind),
                    "count": len(books),
                    "items": [book.model_dump(mode="json") for book in books],
                },
            ),
        )

    def generate_report(self, kind: str) -> ServiceResult:
        """Build a report; raises ``InvalidReportKind`` for unknown kinds."""
        generator = self._reports.get_generator(kind)
        report = generator.generate_report()
        return ServiceResult(
            ok=True,
            op="report",
            message=report,
            data=dump_validated(ReportResultData, {"kind": str(generator.kind), "report": report}),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_book(self, isbn: str) -> Book:
        book = self._store.find_book_by_isbn(isbn)
        if book is None:
            raise BookNotFound(isbn)
        return book

    def _require_member(self, email: str | None) -> Member:
        member = self._store.find_member_by_email(email) if email else None
        if member is None:
            raise MemberNotFound(email)
        return member

    @staticmethod
    def _dispatch_notification(
        event: str,
        send: Callable[[], None],
        warnings: list[str],
    ) -> None:
        """Send a notification after the writes have landed.

        INVARIANT: Notification failures are warnings, never errors.
        """
        try:
            send()
        except Exception:
            logger.warning("Notification failed for %s", event, exc_info=True)
            warnings.append(f"Notification failed for {event}")

"""Domain exceptions for caller and data contract violations.

Expected business refusals (book unavailable, limit reached) are not
exceptions; services return them as declined ``ServiceResult`` values.
Everything here propagates to the caller unmodified.
"""

from __future__ import annotations


class LendingError(Exception):
    """Base class for all lendctl errors."""


class BookNotFound(LendingError, LookupError):
    """No book is stored under the requested ISBN."""

    def __init__(self, isbn: str) -> None:
        self.isbn = isbn
        super().__init__(f"Book not found: {isbn}")


class MemberNotFound(LendingError, LookupError):
    """No member is stored under the requested email."""

    def __init__(self, email: str | None) -> None:
        self.email = email
        super().__init__(f"Member not found: {email}")


class UnknownCategory(LendingError, ValueError):
    """A membership category outside the registered set."""

    def __init__(self, category: object) -> None:
        self.category = category
        super().__init__(f"Unknown membership type: {category!r}")


class InvalidSearchKind(LendingError, ValueError):
    """Search kind other than title, author or isbn."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Invalid search type: {kind!r}")


class InvalidReportKind(LendingError, ValueError):
    """Report kind other than overdue, available or members."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Invalid report type: {kind}")

"""Classification enums for books, members, searches and reports."""

from __future__ import annotations

from enum import StrEnum


class BookStatus(StrEnum):
    """Circulation status of a single book."""

    AVAILABLE = "AVAILABLE"
    CHECKED_OUT = "CHECKED_OUT"


class MembershipType(StrEnum):
    """Membership categories; each maps to one checkout policy and fee strategy."""

    REGULAR = "REGULAR"
    PREMIUM = "PREMIUM"
    STUDENT = "STUDENT"


class SearchKind(StrEnum):
    """Catalog search modes."""

    TITLE = "title"
    AUTHOR = "author"
    ISBN = "isbn"


class ReportKind(StrEnum):
    """Operational report types."""

    OVERDUE = "overdue"
    AVAILABLE = "available"
    MEMBERS = "members"

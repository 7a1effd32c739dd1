"""Report generators — operational summaries computed from storage.

Reports are plain text built on demand; nothing is persisted. The factory
maps a case-insensitive report kind to its generator class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from lendctl.domain.errors import InvalidReportKind
from lendctl.domain.types import BookStatus, ReportKind
from lendctl.services._helpers import today_utc

if TYPE_CHECKING:
    from lendctl.services._helpers import Clock
    from lendctl.services.ports import LibraryStore

OVERDUE_HEADER = "OVERDUE BOOKS REPORT"
OVERDUE_SEPARATOR = "=" * 20


class ReportGenerator(ABC):
    """One report over the current storage state."""

    kind: ClassVar[ReportKind]

    def __init__(self, store: LibraryStore, clock: Clock = today_utc) -> None:
        self._store = store
        self._clock = clock

    @abstractmethod
    def generate_report(self) -> str:
        """Render the report text."""
        ...


class AvailabilityReportGenerator(ReportGenerator):
    kind = ReportKind.AVAILABLE

    def generate_report(self) -> str:
        count = self._store.count_books_by_status(BookStatus.AVAILABLE)
        return f"Available books: {count}"


class MemberReportGenerator(ReportGenerator):
    kind = ReportKind.MEMBERS

    def generate_report(self) -> str:
        return f"Total members: {self._store.count_members()}"


class OverdueReportGenerator(ReportGenerator):
    """Header, separator, then one line per book due before today.

    Books are listed in the order storage returns them.
    """

    kind = ReportKind.OVERDUE

    def generate_report(self) -> str:
        overdue = self._store.find_books_due_before(self._clock())
        lines = [OVERDUE_HEADER, OVERDUE_SEPARATOR]
        lines.extend(
            f"{book.title} by {book.author} - Due: {book.due_date} "
            f"- Checked out by: {book.checked_out_by}"
            for book in overdue
        )
        return "\n".join(lines) + "\n"


REPORT_GENERATORS: dict[ReportKind, type[ReportGenerator]] = {
    gen.kind: gen
    for gen in (OverdueReportGenerator, AvailabilityReportGenerator, MemberReportGenerator)
}


class ReportGeneratorFactory:
    """Builds the generator for a report kind against one store."""

    def __init__(self, store: LibraryStore, clock: Clock = today_utc) -> None:
        self._store = store
        self._clock = clock

    def get_generator(self, kind: str) -> ReportGenerator:
        """Return the generator for *kind* (matched case-insensitively).

        Raises:
            InvalidReportKind: If *kind* names no known report.
        """
        try:
            report_kind = ReportKind(str(kind).strip().lower())
        except ValueError:
            raise InvalidReportKind(kind) from None
        return REPORT_GENERATORS[report_kind](self._store, self._clock)

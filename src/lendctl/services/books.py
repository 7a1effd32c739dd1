"""BookService — state transitions for a single book record."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING

from lendctl.domain.types import BookStatus
from lendctl.services.base import BaseService

if TYPE_CHECKING:
    from lendctl.domain.models import Book, Member

logger = logging.getLogger(__name__)


class BookService(BaseService):
    """Moves a book between AVAILABLE and CHECKED_OUT and persists it."""

    def is_available(self, book: Book) -> bool:
        return book.status == BookStatus.AVAILABLE

    def checkout_book(
        self,
        book: Book,
        member: Member,
        loan_period_days: int,
        *,
        today: date,
    ) -> date:
        """Lend *book* to *member* and return the due date."""
        due_date = today + timedelta(days=loan_period_days)
        book.status = BookStatus.CHECKED_OUT
        book.checked_out_by = member.email
        book.due_date = due_date
        self._store.save_book(book)
        logger.debug("Book %s checked out to %s until %s", book.isbn, member.email, due_date)
        return due_date

    def return_book(self, book: Book) -> None:
        """Mark *book* available again and clear its loan fields."""
        book.status = BookStatus.AVAILABLE
        book.checked_out_by = None
        book.due_date = None
        self._store.save_book(book)
        logger.debug("Book %s returned", book.isbn)

"""Collaborator interfaces consumed by the service layer.

Persistence and message delivery live outside lendctl. Anything that
structurally matches these protocols can be injected into the services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import date

    from lendctl.domain.models import Book, Member
    from lendctl.domain.types import BookStatus


@runtime_checkable
class LibraryStore(Protocol):
    """Storage collaborator for books and members.

    Lookups return ``None`` (or an empty list) on a miss and never raise
    for a missing record. Each ``save_*`` call is an independent write;
    no transaction spans a book and a member update.
    """

    def find_book_by_isbn(self, isbn: str) -> Book | None: ...

    def find_member_by_email(self, email: str) -> Member | None: ...

    def save_book(self, book: Book) -> Book: ...

    def save_member(self, member: Member) -> Member: ...

    def count_books_by_status(self, status: BookStatus) -> int: ...

    def count_members(self) -> int: ...

    def find_books_by_title_contains(self, title: str) -> list[Book]:
        """Case-insensitive partial title match."""
        ...

    def find_books_by_author(self, author: str) -> list[Book]:
        """Case-insensitive partial author match."""
        ...

    def find_books_due_before(self, day: date) -> list[Book]:
        """Books whose due date is strictly before *day*."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Notification collaborator. Return values are ignored; a raised error
    becomes a warning on the lending result.
    """

    def notify_checkout(self, member: Member, book: Book, due_date: date) -> None: ...

    def notify_return(self, member: Member, book: Book, late_fee: float) -> None: ...

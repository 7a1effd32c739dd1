"""Shared pytest fixtures and test doubles for lendctl tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pytest

from lendctl.domain.models import Book, Member
from lendctl.domain.types import BookStatus, MembershipType
from lendctl.services.lending import LendingService

TODAY = date(2026, 3, 15)


class InMemoryLibraryStore:
    """LibraryStore fake backed by insertion-ordered dicts.

    Records every save so tests can assert on write order.
    """

    def __init__(self) -> None:
        self.books: dict[str, Book] = {}
        self.members: dict[str, Member] = {}
        self.writes: list[tuple[str, str]] = []

    def add_book(self, book: Book) -> Book:
        self.books[book.isbn] = book
        return book

    def add_member(self, member: Member) -> Member:
        self.members[member.email] = member
        return member

    def find_book_by_isbn(self, isbn: str) -> Book | None:
        return self.books.get(isbn)

    def find_member_by_email(self, email: str) -> Member | None:
        return self.members.get(email)

    def save_book(self, book: Book) -> Book:
        self.books[book.isbn] = book
        self.writes.append(("book", book.isbn))
        return book

    def save_member(self, member: Member) -> Member:
        self.members[member.email] = member
        self.writes.append(("member", member.email))
        return member

    def count_books_by_status(self, status: BookStatus) -> int:
        return sum(1 for b in self.books.values() if b.status == status)

    def count_members(self) -> int:
        return len(self.members)

    def find_books_by_title_contains(self, title: str) -> list[Book]:
        term = title.lower()
        return [b for b in self.books.values() if term in b.title.lower()]

    def find_books_by_author(self, author: str) -> list[Book]:
        term = author.lower()
        return [b for b in self.books.values() if term in b.author.lower()]

    def find_books_due_before(self, day: date) -> list[Book]:
        return [b for b in self.books.values() if b.due_date is not None and b.due_date < day]


@dataclass
class RecordingNotifier:
    """Notifier double that remembers every call."""

    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def notify_checkout(self, member: Member, book: Book, due_date: date) -> None:
        self.calls.append(("checkout", {"member": member, "book": book, "due_date": due_date}))

    def notify_return(self, member: Member, book: Book, late_fee: float) -> None:
        self.calls.append(("return", {"member": member, "book": book, "late_fee": late_fee}))


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock() -> Callable[[], date]:
    """Fixed clock so due dates and fees are deterministic."""
    return lambda: TODAY


@pytest.fixture
def store() -> InMemoryLibraryStore:
    return InMemoryLibraryStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def lending(
    store: InMemoryLibraryStore,
    notifier: RecordingNotifier,
    clock: Callable[[], date],
) -> LendingService:
    return LendingService(store, notifier, clock=clock)


@pytest.fixture
def make_book(store: InMemoryLibraryStore) -> Callable[..., Book]:
    """Factory that creates a book and stores it."""

    def _make(
        isbn: str = "978-0-123456-78-9",
        title: str = "Test Book",
        author: str = "Test Author",
        **kwargs: Any,
    ) -> Book:
        return store.add_book(Book(isbn=isbn, title=title, author=author, **kwargs))

    return _make


@pytest.fixture
def make_member(store: InMemoryLibraryStore) -> Callable[..., Member]:
    """Factory that creates a member and stores it."""

    def _make(
        email: str = "test@example.com",
        name: str = "Test",
        membership_type: MembershipType = MembershipType.REGULAR,
        books_checked_out: int = 0,
    ) -> Member:
        return store.add_member(
            Member(
                email=email,
                name=name,
                membership_type=membership_type,
                books_checked_out=books_checked_out,
            )
        )

    return _make

"""SearchService — catalog lookups by title, author or ISBN."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lendctl.domain.errors import InvalidSearchKind
from lendctl.domain.types import SearchKind
from lendctl.services.base import BaseService

if TYPE_CHECKING:
    from lendctl.domain.models import Book


def parse_search_kind(kind: str) -> SearchKind:
    """Resolve *kind* case-insensitively.

    Raises:
        InvalidSearchKind: For anything other than title, author or isbn.
    """
    try:
        return SearchKind(str(kind).strip().lower())
    except ValueError:
        raise InvalidSearchKind(kind) from None


class SearchService(BaseService):
    """Thin dispatch onto the storage query for each search kind."""

    def search_by_title(self, title: str) -> list[Book]:
        """Case-insensitive partial title match, in storage order."""
        return list(self._store.find_books_by_title_contains(title))

    def search_by_author(self, author: str) -> list[Book]:
        """Case-insensitive partial author match, in storage order."""
        return list(self._store.find_books_by_author(author))

    def search_by_isbn(self, isbn: str) -> Book | None:
        """Exact ISBN match."""
        return self._store.find_book_by_isbn(isbn)

    def search(self, term: str, kind: str) -> list[Book]:
        """Run the search named by *kind*; an ISBN search yields 0 or 1 book."""
        match parse_search_kind(kind):
            case SearchKind.TITLE:
                return self.search_by_title(term)
            case SearchKind.AUTHOR:
                return self.search_by_author(term)
            case SearchKind.ISBN:
                book = self.search_by_isbn(term)
                return [book] if book is not None else []

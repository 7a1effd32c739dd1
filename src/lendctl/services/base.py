"""BaseService — shared foundation for lendctl services.

Every service receives a :class:`LibraryStore` at construction time and
reads and writes books and members only through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lendctl.services.ports import LibraryStore


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class BookService(BaseService):
            def return_book(self, book: Book) -> None:
                ...
                self._store.save_book(book)
    """

    def __init__(self, store: LibraryStore) -> None:
        self._store = store

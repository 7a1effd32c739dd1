"""Pluggy hook specifications for lending notifications.

Both hooks fire after the book and member writes have been saved, so a
plugin always sees committed state. Return values are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from datetime import date

    from lendctl.domain.models import Book, Member

hookspec = pluggy.HookspecMarker("lendctl")


class LendctlHookSpec:
    """Hook specifications for the lendctl plugin system."""

    @hookspec
    def lendctl_checkout(self, member: Member, book: Book, due_date: date) -> None:
        """Called after a book has been checked out."""

    @hookspec
    def lendctl_return(self, member: Member, book: Book, late_fee: float) -> None:
        """Called after a book has been returned; *late_fee* is 0.0 when on time."""

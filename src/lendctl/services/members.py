"""MemberService — checkout counter maintenance for a single member."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lendctl.services.base import BaseService

if TYPE_CHECKING:
    from lendctl.domain.models import Member

logger = logging.getLogger(__name__)


class MemberService(BaseService):
    """Adjusts ``books_checked_out`` and persists the member."""

    def increment_checkout_count(self, member: Member) -> None:
        member.books_checked_out += 1
        self._store.save_member(member)

    def decrement_checkout_count(self, member: Member) -> None:
        """Decrease the counter by one, never below zero."""
        if member.books_checked_out <= 0:
            logger.warning(
                "Member %s returned a book with a zero checkout count", member.email
            )
            member.books_checked_out = 0
        else:
            member.books_checked_out -= 1
        self._store.save_member(member)

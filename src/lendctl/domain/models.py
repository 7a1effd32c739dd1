"""Book and member records.

Both records are owned by the storage collaborator. Services borrow them
for the length of one operation, mutate them in place, and hand them back
through ``save_book`` / ``save_member``. Assignment is not re-validated so
that a mutator can move a book between states one field at a time; the
status/borrower invariant is checked whenever a record is constructed.
"""

from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator

from lendctl.domain.types import BookStatus, MembershipType


class Book(BaseModel):
    """A single catalog copy identified by ISBN.

    INVARIANT: ``due_date`` and ``checked_out_by`` are both set when the
    book is checked out and both empty when it is available.
    """

    isbn: str
    title: str
    author: str
    status: BookStatus = BookStatus.AVAILABLE
    due_date: date | None = None
    checked_out_by: str | None = None

    @model_validator(mode="after")
    def _check_loan_fields(self) -> Self:
        on_loan = self.status == BookStatus.CHECKED_OUT
        if on_loan and (self.due_date is None or self.checked_out_by is None):
            msg = f"Checked-out book {self.isbn} needs a due date and a borrower"
            raise ValueError(msg)
        if not on_loan and (self.due_date is not None or self.checked_out_by is not None):
            msg = f"Available book {self.isbn} cannot carry a due date or borrower"
            raise ValueError(msg)
        return self

    def is_overdue(self, today: date) -> bool:
        """True if the book is on loan and its due date is strictly before *today*."""
        return self.due_date is not None and self.due_date < today


class Member(BaseModel):
    """A library member identified by email."""

    email: str
    name: str
    membership_type: MembershipType = MembershipType.REGULAR
    books_checked_out: int = Field(default=0, ge=0)

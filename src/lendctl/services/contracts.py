"""Typed payload contracts for lending results.

Payloads are validated before they leave the service layer so that a
renamed key (``items`` vs ``results``) fails in tests rather than in a
caller.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from lendctl.domain.models import Book


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class BookItem(BaseModel):
    """One book row in a search result."""

    model_config = ConfigDict(extra="ignore")

    isbn: str
    title: str
    author: str
    status: str
    due_date: date | None = None
    checked_out_by: str | None = None

    @classmethod
    def from_book(cls, book: Book) -> BookItem:
        return cls.model_validate(book.model_dump(mode="json"))


class SearchResultData(BaseModel):
    """Payload contract for ``LendingService.search_books``."""

    query: str
    kind: str
    count: int
    items: list[BookItem]


class CheckoutResultData(BaseModel):
    """Payload contract for ``LendingService.checkout_book``."""

    isbn: str
    member: str
    due_date: date
    loan_period_days: int


class ReturnResultData(BaseModel):
    """Payload contract for ``LendingService.return_book``."""

    isbn: str
    member: str
    days_late: int
    late_fee: float


class ReportResultData(BaseModel):
    """Payload contract for ``LendingService.generate_report``."""

    kind: str
    report: str

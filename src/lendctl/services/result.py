"""ServiceResult and ServiceError — the lending service contract.

INVARIANT: Checkout, return, search and report operations return
ServiceResult. A declined outcome (a business rule blocked the request)
is ``ok=False`` with a ServiceError; contract violations are raised as
exceptions from :mod:`lendctl.domain.errors` instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured reason for a declined outcome."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for lending operations.

    Attributes:
        ok: False when a business rule declined the operation.
        op: Name of the operation (e.g. ``"checkout"``).
        message: Human-readable outcome on success.
        data: Operation-specific payload on success.
        warnings: Non-fatal issues (e.g. a notification that failed).
        error: Decline reason if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    message: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def declined(self) -> bool:
        return not self.ok and self.error is not None

    @property
    def summary(self) -> str:
        """The outcome text shown to a librarian."""
        if self.error is not None:
            return self.error.message
        return self.message

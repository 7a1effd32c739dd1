"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lendctl.toml only contains overrides.
LendSettings composes the sections directly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class NotificationsConfig(BaseModel):
    """[notifications] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    sender: str = "library@example.org"
    checkout_subject: str = "Book checked out"
    return_subject: str = "Book returned"
    outbox_size: int = Field(default=100, ge=1)


class LendingConfig(BaseModel):
    """[lending] section."""

    model_config = {"frozen": True}

    timezone: str = "UTC"


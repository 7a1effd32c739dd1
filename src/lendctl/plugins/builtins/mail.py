"""Built-in email notification plugin.

Composes a checkout or return email for the member and hands it to the
structured log. Delivery (SMTP, queues) belongs to whatever consumes the
outbox or the log stream, not to lendctl.
"""

from __future__ import annotations

from collections import deque
from email.message import EmailMessage
from typing import TYPE_CHECKING

import structlog

from lendctl.config.models import NotificationsConfig
from lendctl.plugins.manager import hookimpl
from lendctl.services._helpers import format_fee

if TYPE_CHECKING:
    from datetime import date

    from lendctl.domain.models import Book, Member

log = structlog.get_logger("lendctl.notifications")


class EmailNotificationPlugin:
    """Writes one email per lending event into a bounded outbox."""

    def __init__(self, config: NotificationsConfig | None = None) -> None:
        self._config = config or NotificationsConfig()
        self.outbox: deque[EmailMessage] = deque(maxlen=self._config.outbox_size)

    @hookimpl
    def lendctl_checkout(self, member: Member, book: Book, due_date: date) -> None:
        body = (
            f"Hello {member.name},\n\n"
            f"You have checked out {book.title} by {book.author}.\n"
            f"Please return it by {due_date.isoformat()}.\n"
        )
        self._send(member, self._config.checkout_subject, body)

    @hookimpl
    def lendctl_return(self, member: Member, book: Book, late_fee: float) -> None:
        body = f"Hello {member.name},\n\nYou have returned {book.title}.\n"
        if late_fee > 0:
            body += f"A late fee of {format_fee(late_fee)} has been charged.\n"
        self._send(member, self._config.return_subject, body)

    def _send(self, member: Member, subject: str, body: str) -> None:
        msg = EmailMessage()
        msg["From"] = self._config.sender
        msg["To"] = member.email
        msg["Subject"] = subject
        msg.set_content(body)
        self.outbox.append(msg)
        log.info("email.queued", to=member.email, subject=subject, message=body.strip())

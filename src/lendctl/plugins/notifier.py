"""PluginNotifier — the Notifier port backed by pluggy hooks.

Each hook implementation is called on its own so one broken plugin does
not stop the others. Once every plugin has run, the failures are raised
together as one :class:`NotificationError` for the lending service to
turn into a warning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import date

    from lendctl.domain.models import Book, Member
    from lendctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """One or more notification plugins failed for a single event."""

    def __init__(self, hook_name: str, failed: list[str]) -> None:
        self.hook_name = hook_name
        self.failed = failed
        super().__init__(f"{hook_name} failed in plugin(s): {', '.join(failed)}")


class PluginNotifier:
    """Fans checkout and return events out to every registered plugin."""

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager

    @property
    def plugin_manager(self) -> PluginManager:
        return self._pm

    def notify_checkout(self, member: Member, book: Book, due_date: date) -> None:
        self._fire("lendctl_checkout", member=member, book=book, due_date=due_date)

    def notify_return(self, member: Member, book: Book, late_fee: float) -> None:
        self._fire("lendctl_return", member=member, book=book, late_fee=late_fee)

    def _fire(self, hook_name: str, **kwargs: Any) -> None:
        """Call every implementation of *hook_name*.

        Raises:
            NotificationError: After all plugins ran, if any of them raised.
        """
        failed: list[str] = []
        caller = getattr(self._pm.hook, hook_name)
        for impl in caller.get_hookimpls():
            try:
                impl.function(*(kwargs[arg] for arg in impl.argnames))
            except Exception:
                logger.warning(
                    "Plugin %s failed handling %s",
                    impl.plugin_name,
                    hook_name,
                    exc_info=True,
                )
                failed.append(impl.plugin_name)
        if failed:
            raise NotificationError(hook_name, failed)

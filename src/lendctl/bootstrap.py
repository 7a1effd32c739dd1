"""Composition root — wire settings, logging, plugins and the lending service.

The embedding application supplies the storage collaborator; everything
else is built from :class:`LendSettings`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lendctl.config.logging import configure_logging
from lendctl.config.settings import LendSettings
from lendctl.domain.registry import DEFAULT_REGISTRY
from lendctl.plugins.builtins.mail import EmailNotificationPlugin
from lendctl.plugins.manager import PluginManager
from lendctl.plugins.notifier import PluginNotifier
from lendctl.services._helpers import clock_for
from lendctl.services.lending import LendingService

if TYPE_CHECKING:
    from lendctl.domain.registry import PolicyRegistry
    from lendctl.services._helpers import Clock
    from lendctl.services.ports import LibraryStore


def build_plugin_manager(settings: LendSettings, *, discover: bool = True) -> PluginManager:
    """Plugin manager with the built-in email plugin (when enabled) and entry points."""
    pm = PluginManager()
    if settings.notifications.enabled:
        pm.register_plugin(EmailNotificationPlugin(settings.notifications), name="email")
    if discover:
        pm.discover_and_load()
    return pm


def build_lending_service(
    store: LibraryStore,
    settings: LendSettings | None = None,
    *,
    registry: PolicyRegistry | None = None,
    clock: Clock | None = None,
    discover_plugins: bool = True,
    configure_logs: bool = False,
) -> LendingService:
    """Build a ready-to-use :class:`LendingService` around *store*.

    Logging handlers are left alone unless *configure_logs* is set, in
    which case the root logger is rewired from ``settings.logging``.
    """
    settings = settings or LendSettings.load()
    if configure_logs:
        configure_logging(
            verbose=settings.logging.verbose,
            log_json=settings.logging.log_json,
        )
    pm = build_plugin_manager(settings, discover=discover_plugins)
    return LendingService(
        store,
        PluginNotifier(pm),
        registry=registry or DEFAULT_REGISTRY,
        clock=clock or clock_for(settings.lending.timezone),
    )

"""Plugin discovery and registration for lending notifications.

Notification plugins arrive two ways: the built-in email plugin is
registered directly by the composition root, and third-party packages
advertise theirs in the ``lendctl.plugins`` entry-point group.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from lendctl.plugins.hookspecs import LendctlHookSpec

PROJECT_NAME = "lendctl"
ENTRY_POINT_GROUP = "lendctl.plugins"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

logger = logging.getLogger(__name__)

_IMPL_ATTR = f"{PROJECT_NAME}_impl"


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` bound to the lendctl hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LendctlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names of everything registered."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        self._loaded = True
        logger.debug("Loaded %d entry-point plugin(s) from %s", count, ENTRY_POINT_GROUP)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered notification plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether entry-point discovery has run."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugin(self, name: str) -> object | None:
        """The plugin registered under *name*, if any."""
        return self._pm.get_plugin(name)

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _instantiate_class_plugins(self) -> None:
        """Swap plugin classes registered by an entry point for instances.

        A class registered as-is would leave ``self`` unbound when a hook
        fires. A class that cannot be built is dropped with a warning.
        """
        classes = [p for p in self._pm.get_plugins() if inspect.isclass(p)]
        for plugin_cls in classes:
            if not self._has_hook_impls(plugin_cls):
                continue
            name = self._pm.get_name(plugin_cls) or plugin_cls.__name__
            self._pm.unregister(plugin_cls)
            try:
                instance = plugin_cls()
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
                continue
            self._pm.register(instance, name=name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """True if any public attribute of *cls* carries a ``@hookimpl`` marker."""
        return any(
            not attr.startswith("_") and getattr(member, _IMPL_ATTR, None)
            for attr, member in inspect.getmembers(cls, callable)
        )

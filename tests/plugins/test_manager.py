"""Tests for PluginManager — discovery, registration, and hook relay."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from lendctl.domain.models import Book, Member
from lendctl.plugins.manager import ENTRY_POINT_GROUP, PluginManager, hookimpl


class _DummyPlugin:
    """Minimal plugin for registration tests."""

    @hookimpl
    def lendctl_checkout(self, member: Member, book: Book, due_date: date) -> None:
        pass


class _ClassOnlyPlugin:
    """Registered as a class, the way some entry points expose plugins."""

    @hookimpl
    def lendctl_return(self, member: Member, book: Book, late_fee: float) -> None:
        pass


class _BrokenInitPlugin:
    def __init__(self) -> None:
        raise RuntimeError("cannot build")

    @hookimpl
    def lendctl_return(self, member: Member, book: Book, late_fee: float) -> None:
        pass


def _entry_point_loader(
    pm: PluginManager, plugin_cls: type, name: str
) -> Callable[[str], int]:
    """Stand-in for entry-point loading that registers *plugin_cls* itself."""

    def _load(group: str) -> int:
        pm._pm.register(plugin_cls, name=name)
        return 1

    return _load


class TestPluginManager:
    """Tests for the PluginManager class."""

    @pytest.mark.parametrize("hook_name", ["lendctl_checkout", "lendctl_return"])
    def test_hookspecs_registered(self, hook_name: str) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, hook_name)

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="dummy")
        pm.unregister(plugin)
        assert "dummy" not in pm.list_plugin_names()

    def test_get_plugins_returns_registered(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="test")
        assert plugin in pm.get_plugins()

    def test_get_plugin_by_name(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="dummy")
        assert pm.get_plugin("dummy") is plugin
        assert pm.get_plugin("missing") is None

    def test_is_loaded_false_before_discover(self) -> None:
        assert PluginManager().is_loaded is False

    def test_discover_reads_entry_point_group(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pm = PluginManager()
        groups: list[str] = []

        def _load(group: str) -> int:
            groups.append(group)
            return 0

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", _load)

        names = pm.discover_and_load()

        assert groups == [ENTRY_POINT_GROUP]
        assert pm.is_loaded is True
        assert names == []

    def test_discover_instantiates_class_plugins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pm = PluginManager()
        monkeypatch.setattr(
            pm._pm, "load_setuptools_entrypoints", _entry_point_loader(pm, _ClassOnlyPlugin, "class-only")
        )

        pm.discover_and_load()

        plugins = pm.get_plugins()
        assert len(plugins) == 1
        assert isinstance(plugins[0], _ClassOnlyPlugin)
        assert pm.list_plugin_names() == ["class-only"]

    def test_uninstantiable_class_plugin_is_dropped(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        monkeypatch.setattr(
            pm._pm, "load_setuptools_entrypoints", _entry_point_loader(pm, _BrokenInitPlugin, "broken")
        )

        with caplog.at_level("WARNING"):
            pm.discover_and_load()

        assert pm.get_plugins() == []
        assert "Failed to instantiate entry-point plugin broken" in caplog.text

    def test_has_hook_impls(self) -> None:
        assert PluginManager._has_hook_impls(_DummyPlugin) is True
        assert PluginManager._has_hook_impls(object) is False

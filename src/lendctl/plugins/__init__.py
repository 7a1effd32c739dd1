"""Extension layer — notification plugins via pluggy.

Discovery: entry_points (pip-installed) in the ``lendctl.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from lendctl.plugins.manager import PluginManager, hookimpl
from lendctl.plugins.notifier import NotificationError, PluginNotifier

__all__ = ["NotificationError", "PluginManager", "PluginNotifier", "hookimpl"]

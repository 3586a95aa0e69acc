"""
Plugin Registry

PluginRegistry: in-process singleton that stores registered plugins and
dispatches hook events to subscribers.

Hooks are fire-and-forget: each subscriber's handle_hook() is awaited in
sequence; exceptions are caught, logged, and execution continues.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from block_fields.plugins.base import PluginBase

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registered plugins by name, plus an index of hook subscriptions."""

    def __init__(self) -> None:
        self._plugins: dict[str, PluginBase] = {}
        self._hook_subscriptions: dict[str, list[PluginBase]] = defaultdict(list)

    def register(self, plugin: PluginBase) -> None:
        """Register a plugin and index its hook subscriptions."""
        if plugin.meta.name in self._plugins:
            self.unregister(plugin.meta.name)
        self._plugins[plugin.meta.name] = plugin
        for hook in plugin.meta.hooks:
            self._hook_subscriptions[hook].append(plugin)
        logger.info("Plugin registered: %s v%s", plugin.meta.name, plugin.meta.version)

    def unregister(self, name: str) -> PluginBase | None:
        """Remove a plugin and its hook subscriptions."""
        plugin = self._plugins.pop(name, None)
        if plugin is not None:
            for subscribers in self._hook_subscriptions.values():
                if plugin in subscribers:
                    subscribers.remove(plugin)
        return plugin

    def get(self, name: str) -> PluginBase | None:
        return self._plugins.get(name)

    def all_plugins(self) -> list[PluginBase]:
        return list(self._plugins.values())

    def is_registered(self, name: str) -> bool:
        return name in self._plugins

    async def fire_hook(self, hook_name: str, payload: dict[str, Any]) -> list[Any]:
        """
        Fire a hook to all subscribing plugins.

        A misbehaving plugin never prevents others from running or blocks
        request processing.

        Returns:
            Return values from each subscriber (None for no-ops).
        """
        results: list[Any] = []
        for plugin in list(self._hook_subscriptions.get(hook_name, [])):
            try:
                results.append(await plugin.handle_hook(hook_name, payload))
            except Exception as exc:
                logger.warning(
                    "Plugin %s hook %s raised: %s",
                    plugin.meta.name,
                    hook_name,
                    exc,
                )
        return results

    async def unload_all(self) -> None:
        for plugin in self.all_plugins():
            try:
                await plugin.on_unload()
            except Exception as exc:
                logger.warning("Plugin %s failed to unload: %s", plugin.meta.name, exc)
            self.unregister(plugin.meta.name)


# ── Global singleton ──────────────────────────────────────────────────────────
plugin_registry = PluginRegistry()

"""
Plugin Loader

Initialises the built-in plugins at application startup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from block_fields.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


async def initialize_plugins(registry: PluginRegistry, config: dict[str, dict[str, Any]] | None = None) -> None:
    """
    Load and register all built-in plugins.

    Called from main.py lifespan(). The deferred import keeps this module
    importable without pulling in the control registry.
    """
    from block_fields.plugins.block_fields_plugin import BlockFieldsPlugin

    config = config or {}

    for plugin_class in [BlockFieldsPlugin]:
        plugin = plugin_class()
        await plugin.on_load(config.get(plugin.meta.name, {}))
        registry.register(plugin)

    logger.info("Plugin initialisation complete: %d plugins loaded", len(registry.all_plugins()))

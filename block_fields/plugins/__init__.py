"""
Plugin System

Public API:
    PluginMeta: plugin metadata dataclass
    PluginBase: abstract base class for all plugins
    PluginRegistry: registry + hook dispatcher
    plugin_registry: global singleton registry instance
    FilterRegistry: named value filters
    filters: global singleton filter registry
"""

from .base import PluginBase, PluginMeta
from .filters import FilterRegistry, filters
from .registry import PluginRegistry, plugin_registry

__all__ = ["PluginBase", "PluginMeta", "PluginRegistry", "plugin_registry", "FilterRegistry", "filters"]

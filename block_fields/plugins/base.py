"""
Plugin Base Classes

PluginMeta: declarative metadata for a plugin (name, version, hooks).
PluginBase: abstract base class all plugins must subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class PluginMeta:
    """
    Declarative metadata describing a plugin.

    Attributes:
        name:          Machine-readable slug, e.g. "block_fields".
        version:       Semver string, e.g. "1.0.0".
        description:   Human-readable description shown in the admin.
        author:        Plugin author.
        hooks:         Hook names this plugin subscribes to.
    """

    name: str
    version: str
    description: str
    author: str = "Block Fields Team"
    hooks: list[str] = field(default_factory=list)


class PluginBase(ABC):
    """
    Abstract base class for plugins.

    Subclasses must implement the `meta` property. Lifecycle methods are
    no-ops by default.
    """

    @property
    @abstractmethod
    def meta(self) -> PluginMeta:
        """Return the plugin's metadata."""
        ...

    async def on_load(self, config: dict[str, Any]) -> None:  # noqa: B027
        """Called once at startup with the plugin's config dict."""

    async def on_unload(self) -> None:  # noqa: B027
        """Called when the application shuts down."""

    async def handle_hook(self, hook_name: str, payload: dict[str, Any]) -> Any:
        """
        Receive a hook event the plugin declared in PluginMeta.hooks.

        Args:
            hook_name: The hook constant, e.g. "block.saved".
            payload:   Data provided by the hook dispatcher.
        """
        return None

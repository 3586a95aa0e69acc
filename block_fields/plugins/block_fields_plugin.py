"""
Block Fields Plugin

Registers the field controls with the host CMS and listens to block
lifecycle hooks.
"""

from __future__ import annotations

import logging
from typing import Any

from block_fields.blocks.controls.registry import ControlRegistry, control_registry
from block_fields.plugins.base import PluginBase, PluginMeta
from block_fields.plugins.hooks import HOOK_BLOCK_DELETED, HOOK_BLOCK_SAVED

logger = logging.getLogger(__name__)

_META = PluginMeta(
    name="block_fields",
    version="1.0.0",
    description="Custom blocks with structured fields (toggle, text, textarea, number, select, multiselect)",
    hooks=[HOOK_BLOCK_SAVED, HOOK_BLOCK_DELETED],
)


class BlockFieldsPlugin(PluginBase):
    """Exposes the control registry and reports block changes."""

    def __init__(self, controls: ControlRegistry | None = None) -> None:
        self.controls = controls or control_registry
        self._config: dict[str, Any] = {}

    @property
    def meta(self) -> PluginMeta:
        return _META

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    async def on_load(self, config: dict[str, Any]) -> None:
        self._config = config
        logger.debug("BlockFieldsPlugin loaded with controls: %s", ", ".join(self.controls.names()))

    async def handle_hook(self, hook_name: str, payload: dict[str, Any]) -> Any:
        slug = payload.get("block")
        if hook_name == HOOK_BLOCK_SAVED:
            logger.info("Block saved: %s", slug, extra={"block": slug})
        elif hook_name == HOOK_BLOCK_DELETED:
            logger.info("Block deleted: %s", slug, extra={"block": slug})
        return slug

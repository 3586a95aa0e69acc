"""
Control Registry

ControlRegistry: in-process registry mapping control names to control
instances, in registration order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from block_fields.exceptions import ControlNotFoundError

if TYPE_CHECKING:
    from block_fields.blocks.controls.base import ControlBase

logger = logging.getLogger(__name__)


class ControlRegistry:
    """Stores registered controls by name."""

    def __init__(self) -> None:
        self._controls: dict[str, ControlBase] = {}

    def register(self, control: ControlBase) -> None:
        """Register a control, replacing any control with the same name."""
        if control.name in self._controls:
            logger.warning("Control %s re-registered; replacing previous instance", control.name)
        self._controls[control.name] = control
        logger.debug("Control registered: %s", control.name)

    def get(self, name: str) -> ControlBase:
        """Return the control with the given name or raise ControlNotFoundError."""
        try:
            return self._controls[name]
        except KeyError:
            raise ControlNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._controls

    def all(self) -> list[ControlBase]:
        return list(self._controls.values())

    def names(self) -> list[str]:
        return list(self._controls)


def build_default_registry() -> ControlRegistry:
    """Create a registry holding every built-in control."""
    from block_fields.blocks.controls.number import Number
    from block_fields.blocks.controls.select import Multiselect, Select
    from block_fields.blocks.controls.text import Text
    from block_fields.blocks.controls.textarea import Textarea
    from block_fields.blocks.controls.toggle import Toggle

    registry = ControlRegistry()
    for control_class in [Text, Textarea, Number, Toggle, Select, Multiselect]:
        registry.register(control_class())
    return registry


# ── Global singleton ──────────────────────────────────────────────────────────
control_registry = build_default_registry()

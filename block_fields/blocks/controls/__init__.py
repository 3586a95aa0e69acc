"""
Field controls

Public API:
    ControlSetting: one configurable option of a control
    ControlBase: abstract base class for all controls
    ControlRegistry: name to control lookup
    control_registry: global registry holding the built-in controls
"""

from .base import ControlBase, ControlSetting
from .registry import ControlRegistry, build_default_registry, control_registry

__all__ = ["ControlBase", "ControlSetting", "ControlRegistry", "build_default_registry", "control_registry"]

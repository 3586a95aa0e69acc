"""Field model: one named, typed value attached to a block."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Field:
    """
    A block field as configured in the admin.

    Attributes:
        name:     Attribute key the value is stored and looked up under.
        label:    Display label.
        control:  Name of the control used to edit the field, e.g. "toggle".
        type:     Variable type of the stored value ("string", "boolean", ...).
        order:    Position of the field within its block.
        settings: Sanitized control settings, keyed by setting name.
    """

    name: str
    label: str = ""
    control: str = "text"
    type: str = "string"
    order: int = 0
    settings: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Field:
        return cls(
            name=data["name"],
            label=data.get("label", data["name"]),
            control=data.get("control", "text"),
            type=data.get("type", "string"),
            order=int(data.get("order", 0)),
            settings=dict(data.get("settings") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "control": self.control,
            "type": self.type,
            "order": self.order,
            "settings": dict(self.settings),
        }

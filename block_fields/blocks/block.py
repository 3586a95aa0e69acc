"""Block model: a custom content block and its fields."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from block_fields.blocks.field import Field
from block_fields.exceptions import DuplicateFieldError

MAX_KEYWORDS = 3


@dataclass
class Block:
    """
    A custom block defined by a site builder.

    `fields` maps field names to Field objects and is kept sorted by
    Field.order.
    """

    name: str
    title: str = ""
    icon: str = "block_lab"
    category: str = "common"
    keywords: list[str] = field(default_factory=list)
    fields: dict[str, Field] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.keywords = [k for k in self.keywords if k][:MAX_KEYWORDS]
        self._sort_fields()

    def _sort_fields(self) -> None:
        self.fields = dict(sorted(self.fields.items(), key=lambda item: item[1].order))

    def add_field(self, block_field: Field) -> None:
        """Append a field, raising DuplicateFieldError if the name is taken."""
        if block_field.name in self.fields:
            raise DuplicateFieldError(self.name, block_field.name)
        self.fields[block_field.name] = block_field
        self._sort_fields()

    def set_fields(self, fields: list[Field]) -> None:
        """Replace all fields; list position becomes the field order."""
        self.fields = {}
        for order, block_field in enumerate(fields):
            block_field.order = order
            self.add_field(block_field)

    def default_attributes(self) -> dict[str, Any]:
        """Attribute values taken from each field's "default" setting."""
        return {name: f.settings.get("default") for name, f in self.fields.items() if "default" in f.settings}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Block:
        fields = {}
        raw_fields = data.get("fields") or {}
        if isinstance(raw_fields, list):
            raw_fields = {f["name"]: f for f in raw_fields}
        for name, raw in raw_fields.items():
            fields[name] = Field.from_dict({"name": name, **raw})
        return cls(
            name=data["name"],
            title=data.get("title", ""),
            icon=data.get("icon", "block_lab"),
            category=data.get("category", "common"),
            keywords=list(data.get("keywords") or []),
            fields=fields,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "icon": self.icon,
            "category": self.category,
            "keywords": list(self.keywords),
            "fields": {name: f.to_dict() for name, f in self.fields.items()},
        }

    @classmethod
    def from_json(cls, text: str) -> Block:
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

"""
Admin form parsing for block fields.

The "edit block" form posts one group of inputs per field row, keyed by a
unique row id:

    block-fields-name[<uid>]
    block-fields-label[<uid>]
    block-fields-control[<uid>]
    block-fields-settings[<uid>][<setting>]

parse_field_submission() turns those inputs into sanitized Field objects.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from block_fields.blocks.controls.base import ControlBase
from block_fields.blocks.field import Field
from block_fields.exceptions import ValidationError
from block_fields.utils.sanitize import sanitize_text_field
from block_fields.utils.slugify import slugify

if TYPE_CHECKING:
    from block_fields.blocks.controls.base import ControlSetting
    from block_fields.blocks.controls.registry import ControlRegistry

logger = logging.getLogger(__name__)

_ROW_KEY = re.compile(r"^block-fields-(name|label|control)\[([^\]]+)\]$")
_SETTING_KEY = re.compile(r"^block-fields-settings\[([^\]]+)\]\[([^\]]+)\]$")


def _normalise(setting: ControlSetting, value: Any) -> Any:
    """Bring JSON-typed values into the string form the sanitizers expect."""
    if value is True:
        return "1"
    if value is False:
        return "0"
    if isinstance(value, list) and setting.type == "textarea_array":
        return ControlBase.options_to_text(value)
    if isinstance(value, (int, float)):
        return str(value)
    return value


def sanitize_field_settings(control: ControlBase, raw: Mapping[str, Any]) -> dict[str, Any]:
    """
    Sanitize one field's submitted settings with the control's sanitizers.

    Every setting the control declares is present in the result; settings
    missing from `raw` are sanitized from None (an unchecked checkbox is
    never posted). Keys the control does not declare are dropped.
    """
    sanitized: dict[str, Any] = {}
    for setting in control.settings:
        value = _normalise(setting, raw.get(setting.name))
        sanitized[setting.name] = setting.sanitize_value(value)

    dropped = set(raw) - set(sanitized)
    if dropped:
        logger.debug("Dropped unknown %s settings: %s", control.name, ", ".join(sorted(dropped)))
    return sanitized


def _iter_items(form: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> Iterable[tuple[str, Any]]:
    if hasattr(form, "multi_items"):
        return form.multi_items()
    if isinstance(form, Mapping):
        return form.items()
    return form


def parse_field_submission(
    form: Mapping[str, Any] | Iterable[tuple[str, Any]],
    registry: ControlRegistry,
) -> list[Field]:
    """
    Parse the posted field rows of the "edit block" form.

    Args:
        form:     Form data (starlette FormData, a dict, or key/value pairs).
        registry: Registry used to resolve each row's control.

    Returns:
        Sanitized fields in submission order, with `order` set accordingly.

    Raises:
        ValidationError: a row has no control, or two rows share a name.
        ControlNotFoundError: a row names an unregistered control.
    """
    rows: dict[str, dict[str, Any]] = {}

    for key, value in _iter_items(form):
        if match := _ROW_KEY.match(key):
            attr, uid = match.groups()
            rows.setdefault(uid, {"settings": {}})[attr] = value
        elif match := _SETTING_KEY.match(key):
            uid, setting_name = match.groups()
            rows.setdefault(uid, {"settings": {}})["settings"][setting_name] = value

    fields: list[Field] = []
    seen: set[str] = set()
    for order, (uid, row) in enumerate(rows.items()):
        control_name = row.get("control")
        if not control_name:
            raise ValidationError("Field has no control", field=f"block-fields-control[{uid}]")
        control = registry.get(control_name)

        label = sanitize_text_field(row.get("label"))
        name = slugify(sanitize_text_field(row.get("name")) or label, separator="_")
        if not name:
            raise ValidationError("Field needs a name or a label", field=f"block-fields-name[{uid}]")
        if name in seen:
            raise ValidationError(f"Field name '{name}' is used more than once", field=f"block-fields-name[{uid}]")
        seen.add(name)

        fields.append(
            Field(
                name=name,
                label=label or name,
                control=control.name,
                type=control.type,
                order=order,
                settings=sanitize_field_settings(control, row["settings"]),
            )
        )

    logger.debug("Parsed %d field rows", len(fields))
    return fields

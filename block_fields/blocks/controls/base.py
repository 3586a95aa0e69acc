"""
Control Base Classes

ControlSetting: one named, typed option of a control (default value, help text...).
ControlBase: abstract base class every field control subclasses.

A control renders its settings as rows of the admin "edit block" table and
owns the sanitizers used when those settings are submitted back.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from block_fields.utils.sanitize import kses_post, split_lines, to_text
from block_fields.utils.templating import render_admin

if TYPE_CHECKING:
    from block_fields.blocks.field import Field

OPTION_SEPARATOR = " : "


@dataclass
class ControlSetting:
    """
    A named, typed configuration item attached to a control.

    Attributes:
        name:     Key under which the value is stored in Field.settings.
        label:    Label shown in the admin form.
        type:     Settings renderer key, e.g. "text", "checkbox", "textarea_array".
        default:  Value used when a field has no stored value for this setting.
        help:     Help text shown under the label (limited HTML allowed).
        sanitize: Callable applied to submitted values, or None.
        value:    Value currently being rendered.
    """

    name: str
    label: str
    type: str = "text"
    default: Any = ""
    help: str = ""
    sanitize: Callable[[Any], Any] | None = None
    value: Any = None

    def get_value(self) -> Any:
        return self.value

    def sanitize_value(self, raw: Any) -> Any:
        """Run the submitted value through this setting's sanitizer."""
        if self.sanitize is None:
            return raw
        return self.sanitize(raw)

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "type": self.type,
            "default": self.default,
            "help": self.help,
        }


class ControlBase(ABC):
    """
    Abstract base class for field controls.

    Subclasses set `name`, `label` and `type` and implement
    register_settings(), which appends ControlSetting instances to
    self.settings. The order of self.settings is the order the rows render in.
    """

    # Control slug, e.g. "toggle"
    name: str = ""
    # Human-readable control label
    label: str = ""
    # Variable type stored by fields using this control
    type: str = "string"

    def __init__(self) -> None:
        self.settings: list[ControlSetting] = []
        self.register_settings()

    @abstractmethod
    def register_settings(self) -> None:
        """Populate self.settings."""
        ...

    def get_setting(self, name: str) -> ControlSetting | None:
        for setting in self.settings:
            if setting.name == name:
                return setting
        return None

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "type": self.type,
            "settings": [setting.describe() for setting in self.settings],
        }

    # ── Settings rendering ────────────────────────────────────────────────────

    def render_settings(self, field: Field, uid: str) -> str:
        """
        Render the control's settings as admin table rows.

        Args:
            field: The Field whose stored settings fill the inputs.
            uid:   Unique ID used to unify the HTML name, for and id attributes.

        Returns:
            HTML for one <tr> per setting.
        """
        rows = []
        for setting in self.settings:
            if setting.name in field.settings:
                setting.value = field.settings[setting.name]
            else:
                setting.value = setting.default

            classes = [
                f"block-fields-edit-settings-{self.name}-{setting.name}",
                f"block-fields-edit-settings-{self.name}",
                "block-fields-edit-settings",
            ]
            name = f"block-fields-settings[{uid}][{setting.name}]"
            id_ = f"block-fields-edit-settings-{self.name}-{setting.name}_{uid}"

            renderer = getattr(self, f"render_settings_{setting.type}", None)
            if not callable(renderer):
                renderer = self.render_settings_text

            rows.append(
                render_admin(
                    "admin/settings_row.html",
                    classes=classes,
                    id=id_,
                    label=setting.label,
                    help=Markup(kses_post(setting.help)),
                    input=Markup(renderer(setting, name, id_)),
                )
            )
        return "\n".join(rows)

    def render_settings_text(self, setting: ControlSetting, name: str, id_: str) -> str:
        return render_admin("admin/settings/text.html", name=name, id=id_, value=_display(setting.get_value()))

    def render_settings_textarea(self, setting: ControlSetting, name: str, id_: str) -> str:
        return render_admin("admin/settings/textarea.html", name=name, id=id_, value=_display(setting.get_value()))

    def render_settings_checkbox(self, setting: ControlSetting, name: str, id_: str) -> str:
        # True == 1, so stored booleans count as checked too
        checked = setting.get_value() in ("1", 1)
        return render_admin("admin/settings/checkbox.html", name=name, id=id_, checked=checked)

    def render_settings_number(self, setting: ControlSetting, name: str, id_: str) -> str:
        return render_admin("admin/settings/number.html", name=name, id=id_, value=_display(setting.get_value()))

    def render_settings_textarea_array(self, setting: ControlSetting, name: str, id_: str) -> str:
        """Render a list of options inside a textarea, one option per line."""
        options = setting.get_value()
        if isinstance(options, list):
            setting.value = self.options_to_text(options)
        return self.render_settings_textarea(setting, name, id_)

    @staticmethod
    def options_to_text(options: list[Any]) -> str:
        """Convert stored options back to the one-per-line textarea format."""
        lines = []
        for option in options:
            if not isinstance(option, dict):
                lines.append(to_text(option))
                continue
            if "value" not in option or "label" not in option:
                continue
            if option["value"] == option["label"]:
                lines.append(to_text(option["label"]))
            else:
                lines.append(f"{to_text(option['value'])}{OPTION_SEPARATOR}{to_text(option['label'])}")
        return "\n".join(lines).strip()

    # ── Sanitizers ────────────────────────────────────────────────────────────

    @staticmethod
    def sanitize_checkbox(value: Any) -> bool:
        return value == "1"

    @staticmethod
    def sanitize_number(value: Any) -> int | None:
        """Sanitize a non-zero number; empty and "0" become None."""
        if not value or value == "0":
            return None
        digits = re.sub(r"[^0-9+\-]", "", str(value))
        match = re.match(r"[+-]?\d+", digits)
        return int(match.group()) if match else 0

    @staticmethod
    def sanitize_textarea_assoc_array(value: Any) -> list[dict[str, str]]:
        """Parse "value : label" lines into a list of {"value", "label"} options."""
        options = []
        for option in split_lines(value):
            if option == "":
                continue
            key_value = option.split(OPTION_SEPARATOR)
            if len(key_value) > 1:
                options.append({"value": key_value[0], "label": key_value[1]})
            else:
                options.append({"value": option, "label": option})
        return options

    @staticmethod
    def sanitize_textarea_array(value: Any) -> list[str]:
        """Parse lines into a list of values; "value : label" keeps the value."""
        options = []
        for option in split_lines(value):
            if option == "":
                continue
            key_value = option.split(OPTION_SEPARATOR)
            options.append(key_value[0] if len(key_value) > 1 else option)
        return options


def _display(value: Any) -> Any:
    return "" if value is None else value

"""Toggle control: a boolean on/off switch."""

from block_fields.blocks.controls.base import ControlBase, ControlSetting
from block_fields.utils.sanitize import sanitize_textarea_field


class Toggle(ControlBase):
    name = "toggle"
    label = "Toggle"
    type = "boolean"

    def register_settings(self) -> None:
        self.settings.append(
            ControlSetting(
                name="help",
                label="Field instructions",
                type="textarea",
                default="",
                sanitize=sanitize_textarea_field,
            )
        )
        self.settings.append(
            ControlSetting(
                name="default",
                label="Default Value",
                type="checkbox",
                default="0",
                sanitize=self.sanitize_checkbox,
            )
        )

"""Number control: an integer input."""

from block_fields.blocks.controls.base import ControlBase, ControlSetting
from block_fields.utils.sanitize import sanitize_text_field, sanitize_textarea_field


class Number(ControlBase):
    name = "number"
    label = "Number"
    type = "integer"

    def register_settings(self) -> None:
        self.settings.extend(
            [
                ControlSetting(
                    name="help",
                    label="Field instructions",
                    type="textarea",
                    default="",
                    sanitize=sanitize_textarea_field,
                ),
                ControlSetting(
                    name="default",
                    label="Default Value",
                    type="number",
                    default="",
                    sanitize=self.sanitize_number,
                ),
                ControlSetting(
                    name="placeholder",
                    label="Placeholder Text",
                    type="text",
                    default="",
                    sanitize=sanitize_text_field,
                ),
            ]
        )

"""Textarea control: a multi-line text input."""

from block_fields.blocks.controls.base import ControlBase, ControlSetting
from block_fields.utils.sanitize import sanitize_text_field, sanitize_textarea_field


class Textarea(ControlBase):
    name = "textarea"
    label = "Textarea"
    type = "string"

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
                    type="textarea",
                    default="",
                    sanitize=sanitize_textarea_field,
                ),
                ControlSetting(
                    name="placeholder",
                    label="Placeholder Text",
                    type="text",
                    default="",
                    sanitize=sanitize_text_field,
                ),
                ControlSetting(
                    name="maxlength",
                    label="Character Limit",
                    type="number",
                    default="",
                    help="Leave empty for no limit.",
                    sanitize=self.sanitize_number,
                ),
                ControlSetting(
                    name="number_rows",
                    label="Number of Rows",
                    type="number",
                    default=4,
                    sanitize=self.sanitize_number,
                ),
            ]
        )

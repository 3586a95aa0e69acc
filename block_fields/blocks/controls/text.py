"""Text control: a single-line text input."""

from block_fields.blocks.controls.base import ControlBase, ControlSetting
from block_fields.utils.sanitize import sanitize_text_field, sanitize_textarea_field


class Text(ControlBase):
    name = "text"
    label = "Text"
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
                    type="text",
                    default="",
                    sanitize=sanitize_text_field,
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
            ]
        )

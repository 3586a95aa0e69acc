"""Select controls: pick one (Select) or several (Multiselect) values from a list."""

from block_fields.blocks.controls.base import ControlBase, ControlSetting
from block_fields.utils.sanitize import sanitize_text_field, sanitize_textarea_field

OPTIONS_HELP = (
    "Enter each choice on a new line. To specify the value and label separately, "
    "use this format:<br />foo : Foo<br />bar : Bar"
)


class Select(ControlBase):
    name = "select"
    label = "Select"
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
                    name="options",
                    label="Choices",
                    type="textarea_array",
                    default="",
                    help=OPTIONS_HELP,
                    sanitize=self.sanitize_textarea_assoc_array,
                ),
                ControlSetting(
                    name="default",
                    label="Default Value",
                    type="text",
                    default="",
                    sanitize=sanitize_text_field,
                ),
            ]
        )


class Multiselect(ControlBase):
    name = "multiselect"
    label = "Multi-Select"
    type = "array"

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
                    name="options",
                    label="Choices",
                    type="textarea_array",
                    default="",
                    help=OPTIONS_HELP,
                    sanitize=self.sanitize_textarea_assoc_array,
                ),
                ControlSetting(
                    name="default",
                    label="Default Value",
                    type="textarea_array",
                    default="",
                    help="Enter each default value on a new line.",
                    sanitize=self.sanitize_textarea_array,
                ),
            ]
        )

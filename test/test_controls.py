"""
Tests for field controls

Covers ControlSetting, the ControlBase settings renderer and sanitizers,
the built-in controls and the control registry.
"""

import pytest

from block_fields.blocks.controls.base import ControlBase, ControlSetting
from block_fields.blocks.controls.number import Number
from block_fields.blocks.controls.registry import ControlRegistry, build_default_registry
from block_fields.blocks.controls.select import Multiselect, Select
from block_fields.blocks.controls.text import Text
from block_fields.blocks.controls.textarea import Textarea
from block_fields.blocks.controls.toggle import Toggle
from block_fields.blocks.field import Field
from block_fields.exceptions import ControlNotFoundError
from block_fields.utils.sanitize import sanitize_textarea_field


class DemoControl(ControlBase):
    """Control with one setting per renderer, plus an unknown type."""

    name = "demo"
    label = "Demo"

    def register_settings(self) -> None:
        self.settings.extend(
            [
                ControlSetting(name="title", label="Title", type="text", default="Untitled"),
                ControlSetting(name="notes", label="Notes", type="textarea", default=""),
                ControlSetting(name="enabled", label="Enabled", type="checkbox", default="0"),
                ControlSetting(name="limit", label="Limit", type="number", default=""),
                ControlSetting(name="choices", label="Choices", type="textarea_array", default=""),
                ControlSetting(name="color", label="Color", type="colour_picker", default="red"),
            ]
        )


def _field(**settings) -> Field:
    return Field(name="demo_field", control="demo", settings=settings)


class TestControlSetting:
    def test_get_value_returns_value(self):
        setting = ControlSetting(name="help", label="Help", value="abc")
        assert setting.get_value() == "abc"

    def test_sanitize_value_without_sanitizer_returns_raw(self):
        setting = ControlSetting(name="help", label="Help")
        assert setting.sanitize_value(" raw ") == " raw "

    def test_sanitize_value_uses_sanitizer(self):
        setting = ControlSetting(name="help", label="Help", sanitize=str.upper)
        assert setting.sanitize_value("abc") == "ABC"

    def test_describe(self):
        setting = ControlSetting(name="default", label="Default Value", type="checkbox", default="0")
        assert setting.describe() == {
            "name": "default",
            "label": "Default Value",
            "type": "checkbox",
            "default": "0",
            "help": "",
        }


class TestControlBase:
    def test_control_base_is_abstract(self):
        with pytest.raises(TypeError):
            ControlBase()  # type: ignore[abstract]

    def test_constructor_registers_settings(self):
        control = DemoControl()
        assert [s.name for s in control.settings] == ["title", "notes", "enabled", "limit", "choices", "color"]

    def test_instances_do_not_share_settings(self):
        first, second = DemoControl(), DemoControl()
        first.settings.pop()
        assert len(second.settings) == 6

    def test_get_setting(self):
        control = DemoControl()
        assert control.get_setting("limit").type == "number"
        assert control.get_setting("missing") is None


class TestRenderSettings:
    def test_one_row_per_setting_in_order(self):
        html = DemoControl().render_settings(_field(), "abc")
        assert html.count("<tr ") == 6
        assert html.index("[title]") < html.index("[notes]") < html.index("[color]")

    def test_row_classes(self):
        html = DemoControl().render_settings(_field(), "abc")
        assert (
            'class="block-fields-edit-settings-demo-title block-fields-edit-settings-demo '
            'block-fields-edit-settings"'
        ) in html

    def test_name_and_id_attributes(self):
        html = DemoControl().render_settings(_field(), "abc")
        assert 'name="block-fields-settings[abc][title]"' in html
        assert 'id="block-fields-edit-settings-demo-title_abc"' in html
        assert 'for="block-fields-edit-settings-demo-title_abc"' in html

    def test_stored_value_used_when_present(self):
        control = DemoControl()
        html = control.render_settings(_field(title="Hero"), "abc")
        assert 'value="Hero"' in html
        assert control.get_setting("title").value == "Hero"

    def test_default_used_when_missing(self):
        control = DemoControl()
        html = control.render_settings(_field(), "abc")
        assert 'value="Untitled"' in html
        assert control.get_setting("title").value == "Untitled"

    def test_unknown_type_falls_back_to_text(self):
        html = DemoControl().render_settings(_field(), "abc")
        row = html[html.index("block-fields-edit-settings-demo-color ") :]
        assert 'type="text"' in row
        assert 'value="red"' in row

    def test_label_is_escaped(self):
        control = DemoControl()
        control.get_setting("title").label = "<b>Title</b>"
        html = control.render_settings(_field(), "abc")
        assert "&lt;b&gt;Title&lt;/b&gt;" in html

    def test_help_allows_post_tags_only(self):
        control = DemoControl()
        control.get_setting("title").help = "Use <strong>short</strong> titles<script>alert(1)</script>"
        html = control.render_settings(_field(), "abc")
        assert "<strong>short</strong>" in html
        assert "<script>" not in html

    def test_text_value_is_escaped(self):
        html = DemoControl().render_settings(_field(title='"><script>x</script>'), "abc")
        assert "<script>" not in html
        assert "&#34;&gt;&lt;script&gt;" in html


class TestSettingsRenderers:
    def setup_method(self):
        self.control = DemoControl()

    def _render(self, setting_name, value):
        setting = self.control.get_setting(setting_name)
        setting.value = value
        renderer = getattr(self.control, f"render_settings_{setting.type}")
        return renderer(setting, "the-name", "the-id")

    def test_text(self):
        html = self._render("title", "Hello")
        assert 'type="text"' in html
        assert 'class="regular-text"' in html
        assert 'value="Hello"' in html

    def test_text_none_renders_empty(self):
        assert 'value=""' in self._render("title", None)

    def test_textarea(self):
        html = self._render("notes", "a < b")
        assert html.startswith("<textarea")
        assert 'rows="6"' in html
        assert 'class="large-text"' in html
        assert ">a &lt; b</textarea>" in html

    @pytest.mark.parametrize("value", ["1", 1, True])
    def test_checkbox_checked(self, value):
        html = self._render("enabled", value)
        assert 'value="1"' in html
        assert 'checked="checked"' in html

    @pytest.mark.parametrize("value", ["0", "", None, False, "yes"])
    def test_checkbox_unchecked(self, value):
        assert "checked" not in self._render("enabled", value)

    def test_number(self):
        html = self._render("limit", 12)
        assert 'type="number"' in html
        assert 'min="0"' in html
        assert 'value="12"' in html

    def test_textarea_array_converts_options(self):
        options = [
            {"value": "red", "label": "red"},
            {"value": "gr", "label": "Green"},
            "blue",
            {"value": "broken"},
        ]
        html = self._render("choices", options)
        assert ">red\ngr : Green\nblue</textarea>" in html
        assert self.control.get_setting("choices").value == "red\ngr : Green\nblue"

    def test_textarea_array_keeps_text(self):
        html = self._render("choices", "a : A")
        assert ">a : A</textarea>" in html


class TestSanitizers:
    @pytest.mark.parametrize("value, expected", [("1", True), ("0", False), ("", False), (None, False), (1, False)])
    def test_sanitize_checkbox(self, value, expected):
        assert ControlBase.sanitize_checkbox(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("42", 42),
            ("-5", -5),
            ("+7", 7),
            ("1,000", 1000),
            ("12px", 12),
            ("4.5", 45),
            ("abc", 0),
            ("0", None),
            ("", None),
            (None, None),
            (0, None),
        ],
    )
    def test_sanitize_number(self, value, expected):
        assert ControlBase.sanitize_number(value) == expected

    def test_sanitize_textarea_assoc_array(self):
        value = "foo : Foo\r\nbar\n\nbaz : Baz\rqux"
        assert ControlBase.sanitize_textarea_assoc_array(value) == [
            {"value": "foo", "label": "Foo"},
            {"value": "bar", "label": "bar"},
            {"value": "baz", "label": "Baz"},
            {"value": "qux", "label": "qux"},
        ]

    def test_sanitize_textarea_assoc_array_empty(self):
        assert ControlBase.sanitize_textarea_assoc_array("") == []
        assert ControlBase.sanitize_textarea_assoc_array(None) == []

    def test_sanitize_textarea_array(self):
        value = "foo : Foo\r\n\r\nbar\nbaz : Baz"
        assert ControlBase.sanitize_textarea_array(value) == ["foo", "bar", "baz"]

    def test_options_to_text_boolean_scalars(self):
        options = [True, False, {"value": True, "label": "Yes"}, 3]
        assert ControlBase.options_to_text(options) == "1\n\n1 : Yes\n3"

    def test_options_to_text_reverses_assoc_array(self):
        text = "foo : Foo\nbar"
        options = ControlBase.sanitize_textarea_assoc_array(text)
        assert ControlBase.options_to_text(options) == text


class TestToggle:
    def test_identity(self):
        toggle = Toggle()
        assert toggle.name == "toggle"
        assert toggle.label == "Toggle"
        assert toggle.type == "boolean"

    def test_settings(self):
        help_setting, default_setting = Toggle().settings
        assert help_setting.name == "help"
        assert help_setting.label == "Field instructions"
        assert help_setting.type == "textarea"
        assert help_setting.default == ""
        assert help_setting.sanitize is sanitize_textarea_field
        assert default_setting.name == "default"
        assert default_setting.label == "Default Value"
        assert default_setting.type == "checkbox"
        assert default_setting.default == "0"

    def test_default_setting_sanitizes_checkbox(self):
        default_setting = Toggle().get_setting("default")
        assert default_setting.sanitize_value("1") is True
        assert default_setting.sanitize_value(None) is False

    def test_render_settings(self):
        html = Toggle().render_settings(Field(name="flag", control="toggle", settings={"default": True}), "x1")
        assert 'name="block-fields-settings[x1][help]"' in html
        assert "<textarea" in html
        assert 'id="block-fields-edit-settings-toggle-default_x1"' in html
        assert 'checked="checked"' in html


class TestBuiltInControls:
    @pytest.mark.parametrize(
        "control_class, name, type_",
        [
            (Text, "text", "string"),
            (Textarea, "textarea", "string"),
            (Number, "number", "integer"),
            (Select, "select", "string"),
            (Multiselect, "multiselect", "array"),
        ],
    )
    def test_identity(self, control_class, name, type_):
        control = control_class()
        assert control.name == name
        assert control.type == type_
        assert control.settings[0].name == "help"

    def test_select_options_parse_assoc(self):
        options = Select().get_setting("options")
        assert options.type == "textarea_array"
        assert options.sanitize_value("a : A") == [{"value": "a", "label": "A"}]

    def test_multiselect_default_is_list(self):
        default = Multiselect().get_setting("default")
        assert default.sanitize_value("a : A\nb") == ["a", "b"]

    def test_number_default_sanitized(self):
        assert Number().get_setting("default").sanitize_value("15") == 15

    def test_textarea_rows_default(self):
        assert Textarea().get_setting("number_rows").default == 4


class TestControlRegistry:
    def test_default_registry_contents(self):
        registry = build_default_registry()
        assert registry.names() == ["text", "textarea", "number", "toggle", "select", "multiselect"]

    def test_get_unknown_raises(self):
        with pytest.raises(ControlNotFoundError) as exc_info:
            ControlRegistry().get("nope")
        assert exc_info.value.status_code == 404

    def test_register_replaces(self):
        registry = ControlRegistry()
        first, second = Toggle(), Toggle()
        registry.register(first)
        registry.register(second)
        assert registry.get("toggle") is second
        assert len(registry.all()) == 1

    def test_describe(self):
        description = Toggle().describe()
        assert description["name"] == "toggle"
        assert [s["name"] for s in description["settings"]] == ["help", "default"]

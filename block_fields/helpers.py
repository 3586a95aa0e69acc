"""
Template helper functions.

While a block renders, its attribute values and the block itself are held in
context variables. Block templates read them through block_field(),
block_value() and block_params(), which are also registered as template
globals.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from block_fields.utils.sanitize import kses_post, to_text

if TYPE_CHECKING:
    from block_fields.blocks.block import Block

current_attributes: ContextVar[Mapping[str, Any] | None] = ContextVar("block_fields_attributes", default=None)
current_block: ContextVar[Block | None] = ContextVar("block_fields_block", default=None)


@contextmanager
def block_context(block: Block | None, attributes: Mapping[str, Any] | None) -> Iterator[None]:
    """Make a block and its attribute values current for the duration of the block."""
    block_token = current_block.set(block)
    attributes_token = current_attributes.set(attributes)
    try:
        yield
    finally:
        current_attributes.reset(attributes_token)
        current_block.reset(block_token)


def format_field_value(value: Any) -> Any:
    """Turn a stored value into its display form: lists joined, booleans as Yes/No."""
    if isinstance(value, Mapping):
        value = list(value.values())
    if isinstance(value, (list, tuple)):
        value = ", ".join(to_text(item) for item in value)
    if value is True:
        value = "Yes"
    if value is False:
        value = "No"
    return value


def block_field(key: str, echo: bool = True) -> Any:
    """
    Return the value of a block field.

    Args:
        key:  The name of the field as created in the admin.
        echo: When True, return the value formatted for output and filtered
              through the post-content allow-list, as safe markup. When
              False, return the raw stored value.

    Returns:
        The value, or None when no block is rendering or the field is unknown.
    """
    attributes = current_attributes.get()
    if attributes is None or not isinstance(attributes, Mapping) or key not in attributes:
        return None

    value = attributes[key]

    if echo:
        # Filtering may break some markup. Templates that need it intact
        # should use block_value() and escape the result themselves.
        return Markup(kses_post(format_field_value(value)))

    return value


def block_value(key: str) -> Any:
    """Return the raw value of a block field."""
    return block_field(key, echo=False)


def block_params() -> Block | None:
    """Return the block currently rendering."""
    return current_block.get()


TEMPLATE_GLOBALS = {
    "block_field": block_field,
    "block_value": block_value,
    "block_params": block_params,
}

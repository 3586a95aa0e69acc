"""
Block template service.

Locates the template that renders a block and renders it. Templates are
looked up by convention under `blocks/` in, by priority:

    1. a custom path (FILTER_TEMPLATE_PATH)
    2. the theme template directory
    3. the theme stylesheet (child theme) directory
    4. the compat directory
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from block_fields.config import settings
from block_fields.helpers import TEMPLATE_GLOBALS, block_context
from block_fields.plugins.filters import filters
from block_fields.plugins.hooks import FILTER_OVERRIDE_THEME_TEMPLATE, FILTER_TEMPLATE_PATH
from block_fields.utils.templating import render_admin, theme_templates

if TYPE_CHECKING:
    from block_fields.blocks.block import Block

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".html"

theme_templates.globals.update(TEMPLATE_GLOBALS)


def search_roots(path: str | Path = "") -> list[Path]:
    """Directories probed for each template name, highest priority first."""
    path = filters.apply_filters(FILTER_TEMPLATE_PATH, path)
    roots = []
    if path:
        roots.append(Path(path))
    roots.extend(
        [
            Path(settings.template_directory),
            Path(settings.stylesheet_directory),
            Path(settings.compat_directory),
        ]
    )
    return roots


def locate_template(
    template_names: str | list[str],
    path: str | Path = "",
    single: bool = True,
) -> Path | None | list[Path]:
    """
    Locate block templates.

    Args:
        template_names: Template name(s) relative to each search root.
        path:           Optional directory searched before the theme.
        single:         True returns only the first match (or None);
                        False returns every match.

    Returns:
        A Path or None when `single`, otherwise a list of unique Paths in
        the order found.
    """
    if isinstance(template_names, str):
        template_names = [template_names]

    roots = search_roots(path)
    located: list[Path] = []

    for template_name in template_names:
        if not template_name:
            continue
        for root in roots:
            candidate = root / template_name
            if candidate.is_file():
                located.append(candidate)
                if single:
                    break
        if single and located:
            break

    # Remove duplicates, keeping first-seen order
    located = list(dict.fromkeys(located))

    if single:
        return located[0] if located else None
    return located


def template_candidates(slug: str, template_type: str = "block") -> list[str]:
    """
    Template names tried for one block and type.

    The generic `blocks/{type}.html` comes first; `blocks/{type}-{slug}.html`
    is only used when the theme has no generic template for the type.
    """
    return [
        f"blocks/{template_type}{TEMPLATE_EXTENSION}",
        f"blocks/{template_type}-{slug}{TEMPLATE_EXTENSION}",
    ]


def load_template(template_path: Path) -> str:
    """Render a located template file with the helper globals available."""
    source = Path(template_path).read_text(encoding="utf-8")
    return theme_templates.from_string(source).render()


def template_part(slug: str, template_type: str | list[str] = "block", can_edit: bool = False) -> str:
    """
    Render the template part for a block.

    Args:
        slug:          The block name.
        template_type: Template type, or a list of types tried in order.
        can_edit:      When nothing is found, editors see a warning notice;
                       everyone else gets an empty string.

    Returns:
        Rendered HTML.
    """
    types = [template_type] if isinstance(template_type, str) else list(template_type)
    located: Path | None = None
    template_file = ""

    for type_ in types:
        if located:
            break
        candidates = template_candidates(slug, type_)
        template_file = candidates[-1]
        located = locate_template(candidates)

    if located:
        theme_template = filters.apply_filters(FILTER_OVERRIDE_THEME_TEMPLATE, located)
        logger.debug("Rendering block %s with %s", slug, theme_template)
        return load_template(theme_template)

    logger.info("Template file %s not found", template_file)
    if not can_edit:
        return ""
    return render_admin("admin/notice.html", template_file=template_file)


def render_block(
    block: Block,
    attributes: Mapping[str, Any] | None = None,
    can_edit: bool = False,
) -> str:
    """
    Render a block with the given attribute values.

    Attributes missing from `attributes` fall back to each field's default.
    """
    values: dict[str, Any] = {**block.default_attributes(), **(attributes or {})}
    with block_context(block, values):
        return template_part(block.name, can_edit=can_edit)

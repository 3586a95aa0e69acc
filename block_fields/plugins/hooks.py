"""
Hook and Filter Name Constants

Hooks are events plugins subscribe to (PluginRegistry.fire_hook).
Filters are named value pipelines (FilterRegistry.apply_filters).
Names follow the `category.action` convention.
"""

from __future__ import annotations

# ── Block lifecycle hooks ─────────────────────────────────────────────────────
HOOK_BLOCK_SAVED = "block.saved"
HOOK_BLOCK_DELETED = "block.deleted"

ALL_HOOKS: list[str] = [
    HOOK_BLOCK_SAVED,
    HOOK_BLOCK_DELETED,
]

# ── Filters ───────────────────────────────────────────────────────────────────
# Custom directory probed first by locate_template()
FILTER_TEMPLATE_PATH = "template.path"
# Located template path, just before it is rendered
FILTER_OVERRIDE_THEME_TEMPLATE = "template.override_theme_template"
# Icon name → SVG markup map
FILTER_ICONS = "icons.list"
# SVG tag → allowed attributes map
FILTER_ALLOWED_SVG_TAGS = "icons.allowed_svg_tags"

ALL_FILTERS: list[str] = [
    FILTER_TEMPLATE_PATH,
    FILTER_OVERRIDE_THEME_TEMPLATE,
    FILTER_ICONS,
    FILTER_ALLOWED_SVG_TAGS,
]

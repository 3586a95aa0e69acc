"""Block icons and the SVG allow-list used to output them."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import bleach

from block_fields.plugins.filters import filters
from block_fields.plugins.hooks import FILTER_ALLOWED_SVG_TAGS, FILTER_ICONS

logger = logging.getLogger(__name__)

ICONS_FILE = Path(__file__).resolve().parent.parent / "assets" / "icons.json"


def get_icons() -> dict[str, str]:
    """
    Return every available block icon, keyed by icon name.

    To add icons, subscribe to FILTER_ICONS and add SVG strings under unique
    keys.
    """
    icons = json.loads(ICONS_FILE.read_text(encoding="utf-8"))
    return filters.apply_filters(FILTER_ICONS, icons)


def allowed_svg_tags() -> dict[str, list[str]]:
    """Return the tags and attributes an icon <svg> may use."""
    allowed_tags = {
        "svg": ["xmlns", "width", "height", "viewbox", "viewBox"],
        "g": ["fill"],
        "title": ["title"],
        "path": ["d", "fill", "opacity"],
        "circle": ["cx", "cy", "r", "fill"],
    }
    return filters.apply_filters(FILTER_ALLOWED_SVG_TAGS, allowed_tags)


def sanitize_svg(svg: str) -> str:
    """Strip everything from an SVG string that the allow-list does not name."""
    allowed = allowed_svg_tags()
    return bleach.clean(svg, tags=list(allowed), attributes=allowed, strip=True)

"""
Input Sanitization Utilities

HTML sanitization for submitted field settings and for field values echoed
into front-end templates.
"""

import html
import re
from typing import Any, Optional

import bleach

# Tags allowed in post content (help text, echoed field values)
POST_CONTENT_TAGS = [
    'p', 'br', 'strong', 'b', 'em', 'i', 'u', 's', 'sub', 'sup', 'small',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'blockquote', 'cite', 'q', 'abbr',
    'code', 'pre', 'kbd', 'hr', 'ul', 'ol', 'li', 'dl', 'dt', 'dd',
    'a', 'img', 'figure', 'figcaption', 'table', 'thead', 'tbody', 'tfoot',
    'tr', 'th', 'td', 'div', 'span',
]

# Allowed attributes for post content
POST_CONTENT_ATTRS = {
    '*': ['class', 'id', 'title'],
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'abbr': ['title'],
    'td': ['colspan', 'rowspan'],
    'th': ['colspan', 'rowspan', 'scope'],
}

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

_LINE_BREAKS = re.compile(r'\r\n|[\r\n]')


def to_text(value: Any) -> str:
    """Convert a scalar to text; None is empty, True is "1" and False is empty."""
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return value if isinstance(value, str) else str(value)


def strip_tags(text: Optional[str]) -> str:
    """Remove every HTML tag, keeping the text between them."""
    cleaned = bleach.clean(to_text(text), tags=[], strip=True)
    # bleach entity-encodes what it keeps; values are escaped again on output.
    # Stripped block-level tags can leave a leading or trailing line break.
    return html.unescape(cleaned).strip()


def sanitize_text_field(text: Optional[str]) -> str:
    """
    Sanitize a single-line setting value.

    Strips all HTML tags, collapses whitespace (line breaks included) into
    single spaces and trims the result.
    """
    cleaned = strip_tags(text)
    return re.sub(r'\s+', ' ', cleaned).strip()


def sanitize_textarea_field(text: Optional[str]) -> str:
    """
    Sanitize a multi-line setting value.

    Same as sanitize_text_field, but line breaks are preserved.
    """
    cleaned = strip_tags(text)
    lines = [re.sub(r'[ \t]+', ' ', line).rstrip() for line in _LINE_BREAKS.split(cleaned)]
    return "\n".join(lines).strip()


def kses_post(text: Any) -> str:
    """
    Filter HTML down to the tags allowed in post content.

    Disallowed tags are removed, their text is kept.

    Args:
        text: The HTML text to filter (non-strings are converted)

    Returns:
        Filtered HTML string
    """
    return bleach.clean(
        to_text(text),
        tags=POST_CONTENT_TAGS,
        attributes=POST_CONTENT_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


def split_lines(text: Optional[str]) -> list[str]:
    """Split text on CRLF, CR or LF line endings."""
    return _LINE_BREAKS.split(to_text(text))

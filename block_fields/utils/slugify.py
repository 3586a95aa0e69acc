import re
from unidecode import unidecode


def slugify(text, separator="-"):
    """
    Reduce text to lowercase ASCII words joined by `separator`.

    Block slugs use "-"; field names use "_" so they stay valid template
    attribute keys.
    """
    text = unidecode(text or "").lower()
    return re.sub(r'[^a-z0-9]+', separator, text).strip(separator)

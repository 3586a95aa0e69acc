"""
Jinja2 environments.

admin_templates renders the bundled admin markup (settings rows and inputs).
theme_templates renders block templates found in theme directories; the
template helper functions are registered on it as globals.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

admin_templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)

theme_templates = Environment(autoescape=True)


def render_admin(template_name: str, **context) -> str:
    """Render one of the bundled admin templates."""
    return admin_templates.get_template(template_name).render(**context)

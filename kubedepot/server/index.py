"""Rendering of the config selection page."""

import html
import logging
from pathlib import Path
from string import Template

_LOGGER = logging.getLogger(__name__)

INDEX_FILE = "index.html"
DEFAULT_TEMPLATE = Path(__file__).parent / INDEX_FILE

ITEM_TEMPLATE = (
    '      <li><label><input type="checkbox" name="name" value="{value}"> '
    "{label}</label></li>"
)


def load_template(web_dir: Path | None = None) -> Template:
    """Return the index template, preferring web_dir/index.html if present."""
    path = DEFAULT_TEMPLATE
    if web_dir is not None and (web_dir / INDEX_FILE).is_file():
        path = web_dir / INDEX_FILE
    _LOGGER.debug("Using index template %s", path)
    return Template(path.read_text())


def render_index(template: Template, names: list[str]) -> str:
    """Render the selection page for the config names."""
    items = [
        ITEM_TEMPLATE.format(
            value=html.escape(name, quote=True), label=html.escape(name)
        )
        for name in names
    ]
    return template.safe_substitute(configs="\n".join(items))

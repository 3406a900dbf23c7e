"""Layout selection and application using Jinja2 templates"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, TemplateNotFound
from markupsafe import Markup

from mdpage.core.utils.logger import get_logger


logger = get_logger(__name__)

BUILTIN_DIR = Path(__file__).resolve().parent.parent / 'layouts'
BUILTIN_DEFAULT = 'default'
NO_LAYOUT = 'none'
LAYOUT_EXT = '.html'


def select_layout(front_matter: dict[str, Any], default: str = BUILTIN_DEFAULT) -> Optional[str]:
    """Return the layout name requested by front matter, or None for passthrough.

    Missing, null, or empty 'layout' selects the default; 'none' or false disables layouts.
    """
    value = front_matter.get('layout')
    if value is False:
        return None
    if value is None or not str(value).strip():
        name = default
    else:
        name = str(value).strip()
    return None if name.lower() == NO_LAYOUT else name


class LayoutEngine:
    """Jinja2 environment over user layouts (searched first) and the built-in layouts."""

    def __init__(self, layouts_dir: Optional[str | Path] = None):
        loaders = []
        if layouts_dir:
            if not Path(layouts_dir).is_dir():
                logger.warning("layouts directory %s does not exist, using built-in layouts", layouts_dir)
            loaders.append(FileSystemLoader(str(layouts_dir)))
        loaders.append(FileSystemLoader(str(BUILTIN_DIR)))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def list_layouts(self) -> list[str]:
        """Names of every available layout, user and built-in, sorted."""
        names = {n[:-len(LAYOUT_EXT)] for n in self.env.list_templates() if n.endswith(LAYOUT_EXT)}
        return sorted(names)

    def exists(self, name: str) -> bool:
        try:
            self.env.get_template(f"{name}{LAYOUT_EXT}")
        except TemplateNotFound:
            return False
        return True

    def resolve(self, name: Optional[str], default: str = BUILTIN_DEFAULT) -> Optional[str]:
        """Return a layout name that exists, falling back to default, then the built-in default."""
        if name is None:
            return None
        if self.exists(name):
            return name
        logger.warning("layout %r not found, falling back to %r", name, default)
        if default.strip().lower() == NO_LAYOUT:
            return None
        if default != name and self.exists(default):
            return default
        if default != BUILTIN_DEFAULT:
            logger.warning("default layout %r not found, using built-in %r", default, BUILTIN_DEFAULT)
        return BUILTIN_DEFAULT

    def apply(self, name: Optional[str], content: str, styles: Markup, **context: Any) -> str:
        """Render content inside layout name; None emits styles and content only."""
        if name is None:
            return f"{styles}\n{content}" if styles else content
        template = self.env.get_template(f"{name}{LAYOUT_EXT}")
        return template.render(content=Markup(content), styles=styles, **context)

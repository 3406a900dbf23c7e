"""Stylesheet resolution: inline CSS files or reference them with <link>"""

import re
from pathlib import Path
from typing import Any, Iterable, Optional

from markupsafe import Markup, escape

from mdpage.core.models import Stylesheet
from mdpage.core.utils.logger import get_logger


logger = get_logger(__name__)

STYLE_KEYS = ('stylesheet', 'stylesheets')
CLOSE_STYLE_RE = re.compile(r'</(style)', re.IGNORECASE)


def page_stylesheets(front_matter: dict[str, Any]) -> list[str]:
    """Return stylesheet references declared in front matter (string or list values)."""
    refs: list[str] = []
    for key in STYLE_KEYS:
        value = front_matter.get(key)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            refs.extend(str(v) for v in value if v)
        elif value:
            refs.append(str(value))
    return refs


def _find(ref: str, base_dir: Optional[Path]) -> Optional[Path]:
    """Locate ref relative to the document directory first, then the working directory."""
    candidates = [base_dir / ref] if base_dir else []
    candidates.append(Path(ref))
    return next((p for p in candidates if p.is_file()), None)


def resolve_stylesheets(refs: Iterable[str], mode: str = 'inline', base_dir: Optional[Path] = None) -> list[Stylesheet]:
    """Resolve references to Stylesheets, de-duplicated in first-seen order.

    Inline mode reads each file; a file that cannot be found or read is linked instead.
    """
    sheets: list[Stylesheet] = []
    seen: set[str] = set()
    for ref in refs:
        if ref in seen:
            continue
        seen.add(ref)
        if mode != 'inline' or '://' in ref:
            sheets.append(Stylesheet(href=ref))
            continue
        path = _find(ref, base_dir)
        if path is None:
            logger.warning("stylesheet %s not found, linking instead of inlining", ref)
            sheets.append(Stylesheet(href=ref))
            continue
        try:
            css = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("stylesheet %s unreadable (%s), linking instead of inlining", ref, e)
            sheets.append(Stylesheet(href=ref))
            continue
        logger.debug("inlining stylesheet %s", path)
        sheets.append(Stylesheet(href=ref, css=css))
    return sheets


def _safe_css(css: str) -> str:
    """Keep inlined CSS from closing its <style> element early."""
    return CLOSE_STYLE_RE.sub(r'<\\/\1', css)


def render_styles(sheets: Iterable[Stylesheet]) -> Markup:
    """Render <style>/<link> tags, one per line."""
    tags = []
    for sheet in sheets:
        if sheet.css is not None:
            tags.append(f"<style>\n{_safe_css(sheet.css).strip()}\n</style>")
        else:
            tags.append(f'<link rel="stylesheet" href="{escape(sheet.href)}">')
    return Markup("\n".join(tags))

"""Document renderer: front matter + Markdown body -> HTML page"""

from typing import Optional

from mdpage.config import Settings
from mdpage.core.frontmatter import parse_document
from mdpage.core.layouts import LayoutEngine, select_layout
from mdpage.core.markdown import render_markdown
from mdpage.core.models import Document, RenderedPage
from mdpage.core.styles import page_stylesheets, render_styles, resolve_stylesheets
from mdpage.core.utils.logger import get_logger


logger = get_logger(__name__)


def _title(doc: Document, h1: Optional[str], settings: Settings) -> str:
    """Front matter title, else first h1, else site title, else slug."""
    title = doc.front_matter.get('title')
    if title is not None and str(title).strip():
        return str(title).strip()
    return h1 or settings.site_title or doc.slug


def render_document(
    doc: Document,
    settings: Optional[Settings] = None,
    engine: Optional[LayoutEngine] = None,
    ) -> RenderedPage:
    """Render a Document to a complete HTML page.

    Output depends only on the document, settings, and referenced layout/style files.
    """
    settings = settings or Settings()
    engine = engine or LayoutEngine(settings.layouts_dir)

    md = render_markdown(doc.body, settings.parser_config, settings.heading_ids)
    layout = engine.resolve(select_layout(doc.front_matter, settings.default_layout), settings.default_layout)

    refs = page_stylesheets(doc.front_matter)
    if layout is not None:
        refs = [*settings.stylesheets, *refs]
    base_dir = doc.path.parent if doc.path else None
    styles = render_styles(resolve_stylesheets(refs, settings.style_mode, base_dir))

    title = _title(doc, md.h1, settings)
    logger.debug("rendering %s with layout %s", doc.path or doc.slug, layout or 'none')
    html = engine.apply(
        layout,
        md.html,
        styles,
        page=doc.front_matter,
        title=title,
        headings=md.headings,
        site=settings,
        lang=str(doc.front_matter.get('lang') or settings.lang),
    )
    return RenderedPage(
        document=doc,
        layout=layout,
        title=title,
        html=html,
        body_html=md.html,
        headings=md.headings,
    )


def render_text(text: str, settings: Optional[Settings] = None, engine: Optional[LayoutEngine] = None) -> str:
    """Render raw text (front matter + Markdown) to an HTML string."""
    return render_document(parse_document(text), settings, engine).html

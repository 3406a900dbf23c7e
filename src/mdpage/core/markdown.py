"""Markdown body to HTML fragment conversion using markdown-it"""

from dataclasses import dataclass, field
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from mdpage.core.models import Heading
from mdpage.core.utils.slug import unique_slug


@dataclass
class MarkdownResult:
    html:     str
    headings: list[Heading] = field(default_factory=list)
    h1:       Optional[str] = None    # text of the first level-1 heading


def _inline_text(token) -> str:
    """Plain text of an inline token, markup stripped."""
    if not token.children:
        return token.content
    return ''.join(
        c.content for c in token.children
        if c.type in ('text', 'code_inline', 'html_inline', 'image')
    ).strip()


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def _collect_headings(state: StateCore, with_ids: bool) -> None:
    """Core rule: record headings in env and optionally set slug ids on them."""
    seen: dict[str, int] = {}
    headings = state.env.setdefault('headings', [])
    tokens = state.tokens
    for i, tok in enumerate(tokens):
        level = heading_level(tok)
        if level is None:
            continue
        text = _inline_text(tokens[i + 1]) if i + 1 < len(tokens) else ''
        anchor = None
        if with_ids:
            anchor = tok.attrGet('id') or unique_slug(text, seen)
            tok.attrSet('id', anchor)
        headings.append(Heading(level=level, id=anchor, text=text))


def make_parser(preset: str = 'gfm-like', heading_ids: bool = True) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    md = MarkdownIt(preset, options_update={"linkify": False})
    md.core.ruler.push('mdpage_headings', lambda state: _collect_headings(state, heading_ids))
    return md


def render_markdown(body: str, preset: str = 'gfm-like', heading_ids: bool = True) -> MarkdownResult:
    """Convert a Markdown body into an HTML fragment plus its heading outline.

    Malformed markup never raises: unmatched emphasis stays literal and an
    unclosed fence runs to the end of the body.
    """
    md = make_parser(preset, heading_ids)
    env: dict = {}
    tokens = md.parse(body, env)
    html = md.renderer.render(tokens, md.options, env)
    headings = env.get('headings', [])
    h1 = next((h.text for h in headings if h.level == 1 and h.text), None)
    return MarkdownResult(html=html, headings=headings, h1=h1)

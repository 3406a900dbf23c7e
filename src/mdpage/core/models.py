"""Data models passed between the parse, render, and build steps"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class Document:
    """A source resource split into front matter and Markdown body."""
    front_matter: dict[str, Any]
    body:         str
    path:         Optional[Path] = None
    slug:         str = "index"
    hash:         str = ""      # sha256 of the full raw text, front matter included


@dataclass(frozen=True)
class Heading:
    level: int
    id:    Optional[str]
    text:  str


@dataclass(frozen=True)
class Stylesheet:
    """A resolved style source; css is None when it can only be linked."""
    href: str
    css:  Optional[str] = None


@dataclass(frozen=True)
class RenderedPage:
    document:  Document
    layout:    Optional[str]    # None for layout: none passthrough
    title:     str
    html:      str
    body_html: str
    headings:  list[Heading] = field(default_factory=list)

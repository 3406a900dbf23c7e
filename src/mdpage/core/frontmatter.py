"""Front matter extraction: split the leading YAML block from the Markdown body"""

import re
from pathlib import Path
from typing import Any, Optional

import yaml

from mdpage.core.models import Document
from mdpage.core.utils.hashing import sha256
from mdpage.core.utils.logger import get_logger
from mdpage.core.utils.slug import slugify


logger = get_logger(__name__)

FRONTMATTER_RE = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)', re.DOTALL | re.MULTILINE)


def normalize(text: str) -> str:
    """Drop a leading BOM and convert CRLF/CR line endings to LF."""
    if text.startswith('\ufeff'):
        text = text[1:]
    return text.replace('\r\n', '\n').replace('\r', '\n')


def split_front_matter(text: str, source: str = '<string>') -> tuple[dict[str, Any], str]:
    """Return (front_matter, body) with the YAML header removed.

    A missing or unclosed block yields ({}, text). A closed block that is not a
    YAML mapping is dropped from the body and yields an empty mapping.
    """
    text = normalize(text)
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text

    body = text[m.end():]
    try:
        fm = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        logger.warning("%s: ignoring invalid YAML front matter: %s", source, e)
        return {}, body
    if fm is None:
        return {}, body
    if not isinstance(fm, dict):
        logger.warning("%s: ignoring front matter, expected a mapping, got %s", source, type(fm).__name__)
        return {}, body
    return {str(k): v for k, v in fm.items()}, body


def parse_document(text: str, path: Optional[Path] = None) -> Document:
    """Build a Document from raw text; slug comes from front matter or the file stem."""
    front_matter, body = split_front_matter(text, str(path) if path else '<string>')
    slug = front_matter.get('slug')
    slug = slugify(str(slug)) if slug else ''
    if not slug:
        slug = slugify(path.stem) if path else 'index'
    return Document(
        front_matter=front_matter,
        body=body,
        path=path,
        slug=slug or 'index',
        hash=sha256(text),
    )

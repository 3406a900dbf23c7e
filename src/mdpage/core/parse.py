"""File discovery and source reading"""

from pathlib import Path

from mdpage.core.frontmatter import parse_document
from mdpage.core.models import Document


MD_EXTENSIONS = {'.md', '.markdown', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted Markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def read_document(path: Path) -> Document:
    """Read a UTF-8 source file into a Document."""
    return parse_document(path.read_text(encoding='utf-8'), path)

"""Slug generation for document identifiers and heading anchors"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def unique_slug(text: str, seen: dict[str, int], fallback: str = 'section') -> str:
    """Slugify text, suffixing -1, -2, ... when the slug was already used."""
    base = slugify(text) or fallback
    n = seen.get(base, 0)
    candidate = f"{base}-{n}" if n else base
    # a suffixed slug may already be some other heading's natural slug
    while candidate in seen:
        n += 1
        candidate = f"{base}-{n}"
    seen[base] = n + 1
    seen.setdefault(candidate, 1)
    return candidate

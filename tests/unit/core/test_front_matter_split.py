"""Unit tests for core/frontmatter.py"""

from pathlib import Path

import pytest

from mdpage.core.frontmatter import parse_document, split_front_matter
from mdpage.core.utils.hashing import sha256


def test_split_with_yaml():
    """split_front_matter extracts the YAML header and returns the body."""
    fm, body = split_front_matter("---\nlayout: none\n---\n# Body\n")
    assert fm == {"layout": "none"}
    assert body == "# Body\n"


def test_split_no_front_matter():
    """Text without a leading marker is returned whole with an empty mapping."""
    text = "# No front matter\n"
    fm, body = split_front_matter(text)
    assert fm == {}
    assert body == text


def test_split_marker_not_at_start():
    """A --- block that is not at the very start is body content."""
    text = "\n---\nlayout: none\n---\n# Body\n"
    fm, body = split_front_matter(text)
    assert fm == {}
    assert body == text


def test_split_unclosed_block_is_body():
    """An opening marker without a closing one leaves the text untouched."""
    text = "---\nlayout: none\n# Body\n"
    fm, body = split_front_matter(text)
    assert fm == {}
    assert body == text


def test_split_empty_block():
    """An empty block yields an empty mapping and the remaining body."""
    fm, body = split_front_matter("---\n---\nBody\n")
    assert fm == {}
    assert body == "Body\n"


def test_split_closing_marker_at_eof():
    """A closing marker on the last line without a newline still closes the block."""
    fm, body = split_front_matter("---\ntitle: T\n---")
    assert fm == {"title": "T"}
    assert body == ""


def test_split_invalid_yaml_falls_back(caplog):
    """Invalid YAML is dropped from the body with a warning instead of raising."""
    fm, body = split_front_matter("---\nis this even: [a key?\n---\n# Body\n", "bad.md")
    assert fm == {}
    assert body == "# Body\n"
    assert "bad.md" in caplog.text


@pytest.mark.parametrize("block", ["- a\n- b\n", "just a string\n"])
def test_split_non_mapping_falls_back(block, caplog):
    """YAML that is not a mapping yields empty front matter."""
    fm, body = split_front_matter(f"---\n{block}---\n# Body\n")
    assert fm == {}
    assert body == "# Body\n"
    assert "expected a mapping" in caplog.text


def test_split_normalizes_crlf_and_bom():
    """CRLF endings and a leading BOM do not hide the front matter block."""
    fm, body = split_front_matter("\ufeff---\r\nlayout: none\r\n---\r\n# Body\r\n")
    assert fm == {"layout": "none"}
    assert body == "# Body\n"


def test_split_stringifies_keys():
    """Non-string YAML keys are converted to strings."""
    fm, _ = split_front_matter("---\n1: one\n---\n")
    assert fm == {"1": "one"}


def test_split_indented_marker_does_not_close_block():
    """Only a --- line at column zero closes the block."""
    fm, body = split_front_matter("---\nnote: |\n  ---\n---\nBody\n")
    assert fm == {"note": "---\n"}
    assert body == "Body\n"


def test_parse_document_slug_from_front_matter():
    doc = parse_document("---\nslug: Custom Slug\n---\n# Body\n", Path("anything.md"))
    assert doc.slug == "custom-slug"


def test_parse_document_slug_from_filename():
    doc = parse_document("# Body\n", Path("Error Handling.md"))
    assert doc.slug == "error-handling"


def test_parse_document_without_path():
    doc = parse_document("# Body\n")
    assert doc.slug == "index"
    assert doc.path is None


def test_parse_document_hash_matches_raw():
    """The document hash covers the full raw text, front matter included."""
    raw = "---\ntitle: T\n---\n# Body\n"
    doc = parse_document(raw)
    assert doc.hash == sha256(raw)
    assert doc.body == "# Body\n"


def test_split_keeps_list_values():
    """YAML lists in front matter survive as Python lists."""
    fm, body = split_front_matter("---\nlayout: none\ntags:\n  - a\n  - b\n---\n# Heading\nBody\n")
    assert fm == {"layout": "none", "tags": ["a", "b"]}
    assert body == "# Heading\nBody\n"

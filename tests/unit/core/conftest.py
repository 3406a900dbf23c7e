"""Shared fixtures for core unit tests"""

import pytest

from mdpage.config import Settings
from mdpage.core.layouts import LayoutEngine


SAMPLE_MD = """\
# Error Handling

Errors are *values*, not exceptions.

## The `?` operator

- propagate
- convert

```rust
let s = `raw`;
```

See [the book](https://example.com/book).
"""

SAMPLE_FM_MD = """\
---
layout: none
title: Conventions
---

# Conventions

Body content.
"""


@pytest.fixture(name="settings")
def settings_fixture():
    """Settings without the built-in base stylesheet, to keep assertions focused."""
    return Settings(builtin_styles=False)


@pytest.fixture(name="engine")
def engine_fixture():
    return LayoutEngine()


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD

"""Shared fixtures for core unit tests"""

import pytest

from folio.core.models import RawDocument


@pytest.fixture(name="documents")
def documents_fixture():
    """Three posts: two valid dates and one unparseable date, oldest first."""
    return [
        RawDocument("old.md", "---\ntitle: Old\ndate: 2023-01-01\n---\nOld body."),
        RawDocument("broken.md", "---\ntitle: Broken\ndate: someday\n---\nBroken body."),
        RawDocument("new.md", "---\ntitle: New\ndate: 2024-03-01\ntags:\n  - a\n---\nNew body."),
    ]

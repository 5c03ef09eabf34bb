"""Root test configuration: sample post files shared by pipeline and CLI tests"""

from pathlib import Path

import pytest


SAMPLE_POSTS = {
    "hello-world.md": """\
---
title: "Hello, World"
date: 2023-01-01
excerpt: "First post, A and B"
tags:
  - "intro"
  - 'meta'
---

# Hello

The very first post.
""",
    "second.md": """\
---
id: second-post
title: Second
date: 2024-03-01
tags: python
---

Some **bold** words and a [link](https://example.com).
""",
    "draft.md": "No front matter at all, just a draft.\n",
}


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path) -> Path:
    """A posts directory holding SAMPLE_POSTS plus a non-markdown file."""
    d = tmp_path / "posts"
    d.mkdir()
    for name, text in SAMPLE_POSTS.items():
        (d / name).write_text(text, encoding="utf-8")
    (d / "notes.txt").write_text("not a post")
    return d

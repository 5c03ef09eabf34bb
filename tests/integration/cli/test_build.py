"""Integration tests for the CLI commands (build, catalog, sitemap, list, show)"""

import json

import pytest
from typer.testing import CliRunner

from folio.cli.cli import app


@pytest.fixture(name="runner")
def runner_fixture(tmp_path, monkeypatch):
    """CliRunner executing from tmp_path with a fixed site URL."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FOLIO_SITE_URL", "https://example.com")
    return CliRunner()


def test_build_cmd_writes_catalog_and_sitemap(runner, posts_dir, tmp_path):
    """build produces posts.json, per-post JSON, and sitemap.xml."""
    out = tmp_path / "public"
    result = runner.invoke(app, ["build", str(posts_dir), "--out-dir", str(out)])

    assert result.exit_code == 0, result.output
    assert (out / "sitemap.xml").exists()
    assert [e["id"] for e in json.loads((out / "posts.json").read_text())] == [
        "second-post", "hello-world", "draft",
    ]
    assert (out / "posts" / "second-post.json").exists()
    assert "Generated sitemap.xml with 5 URLs" in result.output
    assert "https://example.com#/blog/second-post" in (out / "sitemap.xml").read_text()


def test_build_cmd_uses_configured_posts_dir(runner, posts_dir, tmp_path):
    """Without an argument, posts_dir and output_dir come from config.yaml."""
    (tmp_path / "config.yaml").write_text(f"posts_dir: '{posts_dir}'\noutput_dir: site\n")
    result = runner.invoke(app, ["build"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "site" / "posts.json").exists()


def test_catalog_cmd_skips_sitemap(runner, posts_dir, tmp_path):
    """catalog writes the JSON export only."""
    out = tmp_path / "public"
    result = runner.invoke(app, ["catalog", str(posts_dir), "--out-dir", str(out)])
    assert result.exit_code == 0, result.output
    assert (out / "posts.json").exists()
    assert not (out / "sitemap.xml").exists()


def test_sitemap_cmd_site_url_option(runner, posts_dir, tmp_path):
    """--site-url overrides the configured base URL."""
    out = tmp_path / "public"
    result = runner.invoke(app, [
        "sitemap", str(posts_dir), "--out-dir", str(out), "--site-url", "https://other.test",
    ])
    assert result.exit_code == 0, result.output
    assert "https://other.test#/blog/draft" in (out / "sitemap.xml").read_text()
    assert not (out / "posts.json").exists()


def test_missing_posts_dir_fails(runner, tmp_path):
    """A missing posts directory is reported and exits 1."""
    result = runner.invoke(app, ["build", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Posts directory not found" in result.output


def test_list_cmd(runner, posts_dir):
    """list prints posts newest first with reading time."""
    result = runner.invoke(app, ["list", str(posts_dir)])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0].startswith("2024-03-01  second-post  (1 min)  Second")
    assert "draft" in lines[2]


def test_list_cmd_tag_filter(runner, posts_dir):
    """--tag limits output to matching posts; no match exits 1."""
    result = runner.invoke(app, ["list", str(posts_dir), "--tag", "intro"])
    assert result.exit_code == 0, result.output
    assert "hello-world" in result.output
    assert "second-post" not in result.output

    result = runner.invoke(app, ["list", str(posts_dir), "--tag", "nothing"])
    assert result.exit_code == 1
    assert "No posts found." in result.output


def test_show_cmd(runner, posts_dir):
    """show prints title, date line, tags, and the markdown body."""
    result = runner.invoke(app, ["show", "hello-world", "--posts-dir", str(posts_dir)])
    assert result.exit_code == 0, result.output
    assert "Hello, World" in result.output
    assert "2023-01-01 - 1 min read" in result.output
    assert "Tags: intro, meta" in result.output
    assert "# Hello" in result.output


def test_show_cmd_html(runner, posts_dir):
    """--html prints the rendered body."""
    result = runner.invoke(app, ["show", "hello-world", "--posts-dir", str(posts_dir), "--html"])
    assert result.exit_code == 0, result.output
    assert "<h1>Hello</h1>" in result.output


def test_show_cmd_unknown_id(runner, posts_dir):
    """An unknown id is an error."""
    result = runner.invoke(app, ["show", "nope", "--posts-dir", str(posts_dir)])
    assert result.exit_code == 1
    assert "No post with id 'nope'" in result.output

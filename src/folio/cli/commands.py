"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from folio.config import Settings, load_config
from folio.core.catalog import build_catalog, filter_by_tag, find_item
from folio.core.export import render_html
from folio.core.models import ContentItem
from folio.core.pipeline import load_posts, run_catalog, run_sitemap


PostsDir = Annotated[Optional[str], typer.Argument(help="Directory of markdown posts")]
OutDir = Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")]
SiteUrl = Annotated[Optional[str], typer.Option("--site-url", help="Base URL for sitemap locations")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _catalog(settings: Settings) -> list[ContentItem]:
    try:
        return build_catalog(load_posts(Path(settings.posts_dir)))
    except RuntimeError as e:
        _fail(str(e))


def _export(settings: Settings) -> None:
    try:
        catalog, index_path, written = run_catalog(
            Path(settings.posts_dir), Path(settings.output_dir), settings.parser_config,
        )
    except RuntimeError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Export failed", e)
    for post_id, path in written:
        typer.echo(f"  {post_id} -> {path}")
    typer.echo(f"Exported {len(catalog)} post(s) to {index_path}")


def _sitemap(settings: Settings) -> None:
    try:
        entries, path = run_sitemap(Path(settings.posts_dir), Path(settings.output_dir), settings.site_url)
    except RuntimeError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Sitemap generation failed", e)
    typer.echo(f"Generated sitemap.xml with {len(entries)} URLs")
    typer.echo(f"  Location: {path}")


def build_cmd(path: PostsDir = None, out: OutDir = None, site_url: SiteUrl = None):
    """Export the post catalog and generate sitemap.xml."""
    settings = _settings(overrides={"posts_dir": path, "output_dir": out, "site_url": site_url})
    _export(settings)
    _sitemap(settings)


def catalog_cmd(path: PostsDir = None, out: OutDir = None):
    """Write posts.json and one JSON file per post with rendered HTML."""
    _export(_settings(overrides={"posts_dir": path, "output_dir": out}))


def sitemap_cmd(path: PostsDir = None, out: OutDir = None, site_url: SiteUrl = None):
    """Generate sitemap.xml for the home page, blog index, and every post."""
    _sitemap(_settings(overrides={"posts_dir": path, "output_dir": out, "site_url": site_url}))


def list_cmd(
    path: PostsDir = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts carrying this tag")] = None,
    ):
    """List posts newest first with their reading time."""
    catalog = _catalog(_settings(overrides={"posts_dir": path}))
    if tag:
        catalog = filter_by_tag(catalog, tag)
    if not catalog:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for item in catalog:
        typer.echo(f"{item.date or '-':<10}  {item.id}  ({item.reading_time_minutes} min)  {item.title}")


def show_cmd(
    post_id: Annotated[str, typer.Argument(help="Post id")],
    path: Annotated[Optional[str], typer.Option("--posts-dir", help="Directory of markdown posts")] = None,
    html: Annotated[bool, typer.Option("--html", help="Print the rendered HTML body")] = False,
    ):
    """Print one post's metadata and body."""
    settings = _settings(overrides={"posts_dir": path})
    item = find_item(_catalog(settings), post_id)
    if item is None:
        _fail(f"No post with id '{post_id}'")
    typer.echo(item.title)
    typer.echo(f"{item.date or 'undated'} - {item.reading_time_minutes} min read")
    if item.tags:
        typer.echo(f"Tags: {', '.join(item.tags)}")
    typer.echo("")
    typer.echo(render_html(item.body, settings.parser_config) if html else item.body)

"""Pipeline step functions: load posts, export the catalog, and write the sitemap"""

import logging
from datetime import date
from pathlib import Path

from folio.core.catalog import build_catalog
from folio.core.export import write_catalog
from folio.core.models import ContentItem, RawDocument, SitemapEntry
from folio.core.sitemap import sitemap_entries, write_sitemap
from folio.core.sources import discover_files, read_document


logger = logging.getLogger(__name__)


def load_posts(posts_dir: Path) -> list[RawDocument]:
    """Read every post under posts_dir. Raises RuntimeError naming the failing path."""
    if not posts_dir.exists():
        raise RuntimeError(f"Posts directory not found: {posts_dir}")
    documents = []
    for p in discover_files(posts_dir):
        try:
            documents.append(read_document(p))
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to read {p}: {e}") from e
    logger.info(f"Loaded {len(documents)} post(s) from {posts_dir}")
    return documents


def run_catalog(
    posts_dir: Path,
    output_dir: Path,
    preset: str = 'gfm-like',
    ) -> tuple[list[ContentItem], Path, list[tuple[str, Path]]]:
    """Build the catalog and export it. Returns (catalog, index_path, [(id, post_path), ...])."""
    catalog = build_catalog(load_posts(posts_dir))
    index_path, written = write_catalog(catalog, output_dir, preset)
    return catalog, index_path, written


def run_sitemap(
    posts_dir: Path,
    public_dir: Path,
    site_url: str,
    today: date | None = None,
    ) -> tuple[list[SitemapEntry], Path]:
    """Generate and write sitemap.xml. Returns (entries, sitemap_path)."""
    entries = sitemap_entries(load_posts(posts_dir), site_url, today)
    return entries, write_sitemap(entries, public_dir)

"""sitemap.xml generation for the hash-routed home, blog index, and post pages"""

import logging
from datetime import date
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import escape

from folio.core.catalog import document_id, parse_date, scalar
from folio.core.frontmatter import parse_front_matter
from folio.core.models import RawDocument, SitemapEntry


logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
SITEMAP_FILE = "sitemap.xml"
BLOG_ROUTE = "#/blog"

# (route, priority, changefreq)
STATIC_PAGES = [
    ("",         "1.0", "weekly"),
    (BLOG_ROUTE, "0.9", "weekly"),
]
POST_PRIORITY = "0.8"
POST_CHANGEFREQ = "monthly"


def post_date(doc: RawDocument, today: date) -> tuple[str, date]:
    """Return (id, lastmod date) for a post; missing or unparseable dates become today."""
    meta = parse_front_matter(doc.text).metadata
    parsed = parse_date(scalar(meta, 'date'))
    return document_id(doc.name, meta), parsed.date() if parsed else today


def sitemap_entries(
    documents: Iterable[RawDocument],
    site_url: str,
    today: date | None = None,
    ) -> list[SitemapEntry]:
    """Static page entries followed by one entry per post, newest post first."""
    today = today or date.today()
    base = site_url.rstrip('/')

    entries = [
        SitemapEntry(loc=f"{base}{route}", lastmod=today.isoformat(), changefreq=freq, priority=prio)
        for route, prio, freq in STATIC_PAGES
    ]
    posts = sorted((post_date(doc, today) for doc in documents), key=lambda p: p[1], reverse=True)
    entries.extend(
        SitemapEntry(
            loc=f"{base}{BLOG_ROUTE}/{post_id}",
            lastmod=lastmod.isoformat(),
            changefreq=POST_CHANGEFREQ,
            priority=POST_PRIORITY,
        )
        for post_id, lastmod in posts
    )
    return entries


def _format_entry(entry: SitemapEntry) -> str:
    return (
        "  <url>\n"
        f"    <loc>{escape(entry.loc)}</loc>\n"
        f"    <lastmod>{entry.lastmod}</lastmod>\n"
        f"    <changefreq>{entry.changefreq}</changefreq>\n"
        f"    <priority>{entry.priority}</priority>\n"
        "  </url>"
    )


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    """Render entries as a sitemaps.org urlset document."""
    body = "\n".join(_format_entry(e) for e in entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NS}">\n'
        f"{body}\n"
        "</urlset>\n"
    )


def write_sitemap(entries: list[SitemapEntry], public_dir: Path) -> Path:
    """Write sitemap.xml into public_dir and return its path."""
    public_dir.mkdir(parents=True, exist_ok=True)
    path = public_dir / SITEMAP_FILE
    path.write_text(render_sitemap(entries), encoding='utf-8')
    logger.info(f"Generated {SITEMAP_FILE} with {len(entries)} URLs at {path}")
    return path

"""Catalog export: posts.json index plus one JSON file per post with rendered HTML"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from markdown_it import MarkdownIt

from folio.core.models import ContentItem


logger = logging.getLogger(__name__)

INDEX_FILE = "posts.json"
POSTS_SUBDIR = "posts"
INDEX_FIELDS = {"id", "title", "date", "excerpt", "tags", "reading_time_minutes"}


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_html(body: str, preset: str = 'gfm-like') -> str:
    """Render a markdown post body to an HTML fragment."""
    return _make_parser(preset).render(body)


def build_index(catalog: list[ContentItem]) -> list[dict]:
    """List-view entries in catalog order, without bodies."""
    return [item.model_dump(mode='json', include=INDEX_FIELDS) for item in catalog]


def build_post(item: ContentItem, preset: str = 'gfm-like') -> dict:
    """Full post record: every catalog field plus the rendered body."""
    return {**item.model_dump(mode='json'), "html": render_html(item.body, preset)}


def post_path(posts_dir: Path, item_id: str) -> Path | None:
    """Return posts_dir / {id}.json, or None if the id would resolve outside posts_dir."""
    root = posts_dir.resolve()
    path = (root / f"{item_id}.json").resolve()
    return path if path.is_relative_to(root) else None


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')


def write_catalog(
    catalog: list[ContentItem],
    output_dir: Path,
    preset: str = 'gfm-like',
    ) -> tuple[Path, list[tuple[str, Path]]]:
    """Write the index and per-post JSON files.

    Layout:
      output_dir / posts.json
      output_dir / posts / {id}.json

    Returns (index_path, [(id, post_path), ...]). Items sharing an id overwrite
    each other in catalog order. Ids that would escape posts/ (``..`` segments,
    absolute paths) are skipped with a warning; they stay in the index.
    """
    posts_dir = output_dir / POSTS_SUBDIR
    posts_dir.mkdir(parents=True, exist_ok=True)

    index_path = output_dir / INDEX_FILE
    _write_json(index_path, build_index(catalog))

    written = []
    for item in catalog:
        path = post_path(posts_dir, item.id)
        if path is None:
            logger.warning(f"Skipping post file for id {item.id!r}: path is outside {posts_dir}")
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        _write_json(path, build_post(item, preset))
        written.append((item.id, path))
    logger.info(f"Exported {len(written)} post(s) to {posts_dir}")
    return index_path, written

"""Catalog building: raw documents -> ContentItems ordered most recent first"""

import logging
import re
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Iterable

from folio.core.frontmatter import parse_front_matter
from folio.core.models import ContentItem, MetadataRecord, RawDocument
from folio.core.reading_time import estimate_reading_time


logger = logging.getLogger(__name__)

CONTENT_EXT_RE = re.compile(r'\.md$')
# Extended ISO 8601 forms that fromisoformat reads the same on every supported Python
ISO_DATE_RE = re.compile(
    r'^\d{4}-\d{2}-\d{2}'
    r'(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{3}(?:\d{3})?)?)?(?:Z|[+-]\d{2}:\d{2})?)?$'
)
DATE_FORMATS = ['%b %d, %Y', '%B %d, %Y', '%Y/%m/%d']


def scalar(metadata: MetadataRecord, key: str, default: str = "") -> str:
    """Return the scalar value for key, or default if absent or list-valued."""
    value = metadata.get(key)
    return value if isinstance(value, str) else default


def document_id(name: str, metadata: MetadataRecord) -> str:
    """Metadata id if non-empty, else the file name without its .md extension."""
    return scalar(metadata, 'id') or CONTENT_EXT_RE.sub('', PurePath(name).name) or 'untitled'


def parse_date(value: str) -> datetime | None:
    """Parse an ISO or 'Mon D, YYYY' date string into a naive UTC datetime, else None."""
    value = value.strip()
    if not value:
        return None
    parsed = None
    if ISO_DATE_RE.match(value):
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            return None
    else:
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def build_item(doc: RawDocument) -> ContentItem:
    """Parse one document and resolve every catalog field to a value or its default."""
    parsed = parse_front_matter(doc.text)
    meta = parsed.metadata
    item_id = document_id(doc.name, meta)
    tags = meta.get('tags')
    return ContentItem(
        id=item_id,
        title=scalar(meta, 'title', item_id),
        date=scalar(meta, 'date'),
        excerpt=scalar(meta, 'excerpt'),
        tags=tuple(str(t) for t in tags) if isinstance(tags, list) else (),
        body=parsed.body,
        reading_time_minutes=estimate_reading_time(parsed.body),
    )


def sort_catalog(items: Iterable[ContentItem]) -> list[ContentItem]:
    """Sort by date descending; undated items go last in encounter order."""
    return sorted(items, key=lambda i: parse_date(i.date) or datetime.min, reverse=True)


def build_catalog(documents: Iterable[RawDocument]) -> list[ContentItem]:
    """Build the ordered catalog for a set of raw documents. No I/O."""
    items = []
    for doc in documents:
        item = build_item(doc)
        logger.debug(f"Built {item.id} from {doc.name} ({item.reading_time_minutes} min)")
        items.append(item)
    return sort_catalog(items)


def find_item(catalog: Iterable[ContentItem], item_id: str) -> ContentItem | None:
    """Return the first item with the given id, or None."""
    return next((i for i in catalog if i.id == item_id), None)


def filter_by_tag(catalog: Iterable[ContentItem], tag: str) -> list[ContentItem]:
    """Return items carrying tag, keeping catalog order."""
    return [i for i in catalog if tag in i.tags]

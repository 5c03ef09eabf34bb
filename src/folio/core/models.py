"""Data models for raw documents, parsed front matter, catalog items, and sitemap entries"""

from dataclasses import dataclass, field
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


MetadataValue = Union[str, list[str]]
MetadataRecord = dict[str, MetadataValue]


@dataclass(frozen=True)
class RawDocument:
    """A content file as handed to the catalog: logical file name plus full text."""
    name: str       # e.g. 'my-post.md'
    text: str


@dataclass(frozen=True)
class ParsedFrontMatter:
    """Result of splitting a raw document into metadata and body."""
    metadata: MetadataRecord = field(default_factory=dict)
    body:     str = ""


class ContentItem(BaseModel):
    """One catalog entry derived from a single RawDocument."""
    model_config = ConfigDict(frozen=True)

    id:                   str
    title:                str
    date:                 str = ""
    excerpt:              str = ""
    tags:                 tuple[str, ...] = ()
    body:                 str = ""
    reading_time_minutes: int = Field(default=1, ge=1)


class SitemapEntry(BaseModel):
    """A single <url> element of sitemap.xml."""
    model_config = ConfigDict(frozen=True)

    loc:        str
    lastmod:    str             # YYYY-MM-DD
    changefreq: str = "monthly"
    priority:   str = "0.8"

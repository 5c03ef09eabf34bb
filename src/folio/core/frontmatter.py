"""Front-matter parsing for the site's post header dialect: scalar fields plus a `tags` list"""

import re
from dataclasses import dataclass
from functools import reduce

from folio.core.models import MetadataRecord, ParsedFrontMatter


FRONT_MATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n?', re.DOTALL)
LINE_BREAK_RE = re.compile(r'\r?\n')
LIST_MARKER_RE = re.compile(r'^-+\s*')
ARRAY_FIELDS = frozenset({'tags'})


@dataclass(frozen=True)
class ParseState:
    """Fold state: metadata collected so far and the field the last key line opened."""
    metadata: MetadataRecord
    current:  str | None = None


def clean_value(value: str) -> str:
    """Trim value and strip one layer of matching single or double quotes."""
    trimmed = value.strip()
    if trimmed and trimmed[0] == trimmed[-1] and trimmed[0] in ('"', "'"):
        return trimmed[1:-1]
    return trimmed


def step(state: ParseState, raw_line: str) -> ParseState:
    """Apply one front-matter line to state and return the new state."""
    line = raw_line.strip()
    if not line:
        return state

    if line.startswith('-'):
        # list items only count under an array field; anything else is dropped
        if state.current not in ARRAY_FIELDS:
            return state
        existing = state.metadata.get(state.current)
        items = existing if isinstance(existing, list) else []
        value = clean_value(LIST_MARKER_RE.sub('', line, count=1))
        return ParseState({**state.metadata, state.current: [*items, value]}, state.current)

    key, _, value_part = line.partition(':')
    key = key.strip()
    value = clean_value(value_part)
    if key in ARRAY_FIELDS:
        return ParseState({**state.metadata, key: [value] if value else []}, key)
    return ParseState({**state.metadata, key: value}, key)


def parse_block(block: str) -> MetadataRecord:
    """Parse the text between the front-matter delimiters into a metadata record."""
    return reduce(step, LINE_BREAK_RE.split(block), ParseState({})).metadata


def parse_front_matter(raw: str) -> ParsedFrontMatter:
    """Split raw into (metadata, body). Never raises; no header yields empty metadata."""
    m = FRONT_MATTER_RE.match(raw)
    if not m:
        return ParsedFrontMatter(metadata={}, body=raw.strip())
    return ParsedFrontMatter(metadata=parse_block(m.group(1)), body=raw[m.end():].strip())

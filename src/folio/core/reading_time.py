"""Reading-time estimate for markdown post bodies"""

import math
import re


WORDS_PER_MINUTE = 200
CODE_WEIGHT = 0.5

CODE_FENCE_RE = re.compile(r'```.*?```', re.DOTALL)

# Applied in order to the text left after fenced code is removed.
MARKDOWN_STRIP_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r'<!--.*?-->', re.DOTALL),              ''),      # html comments
    (re.compile(r'`[^`]*`'),                            ''),      # inline code
    (re.compile(r'!\[[^\]]*\]\([^)]*\)'),               ''),      # images
    (re.compile(r'\[([^\]]*)\]\([^)]*\)'),              r'\1'),   # links -> link text
    (re.compile(r'(\*\*|__)(.*?)\1'),                   r'\2'),   # bold
    (re.compile(r'(\*|_)(.*?)\1'),                      r'\2'),   # italic
    (re.compile(r'^#+\s+', re.MULTILINE),               ''),      # headings
    (re.compile(r'^\s*[-*+]\s+', re.MULTILINE),         ''),      # unordered list items
    (re.compile(r'^\s*\d+\.\s+', re.MULTILINE),         ''),      # ordered list items
    (re.compile(r'^>\s+', re.MULTILINE),                ''),      # blockquotes
    (re.compile(r'^(---|\*\*\*|___)\s*$', re.MULTILINE), ''),     # horizontal rules
]


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def strip_markdown(text: str) -> str:
    """Remove markdown syntax that should not count as words."""
    for pattern, repl in MARKDOWN_STRIP_RULES:
        text = pattern.sub(repl, text)
    return text


def estimate_reading_time(
    body: str,
    words_per_minute: int = WORDS_PER_MINUTE,
    code_weight: float = CODE_WEIGHT,
    ) -> int:
    """Return estimated reading time in whole minutes (minimum 1).

    Words inside fenced code blocks count at code_weight (half by default);
    everything else counts once after markdown syntax is stripped.
    """
    code_blocks = CODE_FENCE_RE.findall(body)
    prose = strip_markdown(CODE_FENCE_RE.sub('', body))

    weighted = count_words(prose) + code_weight * count_words(' '.join(code_blocks))
    return max(1, math.ceil(weighted / words_per_minute))

"""Word counting over rendered markdown and reading-time estimation"""

import re
from functools import lru_cache

from markdown_it import MarkdownIt


WORDS_PER_MINUTE = 200
WORD_RE = re.compile(r"\w+(?:['’-]\w+)*")

TEXT_CHILDREN = {'text', 'code_inline'}
CODE_BLOCKS = {'fence', 'code_block'}


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _text_chunks(tokens: list):
    """Yield readable text from a markdown-it token stream (no markup, HTML or image targets)."""
    for tok in tokens:
        if tok.type == 'inline':
            for child in tok.children or []:
                if child.type in TEXT_CHILDREN:
                    yield child.content
        elif tok.type in CODE_BLOCKS:
            yield tok.content


def count_words(markdown: str, parser_config: str = 'gfm-like') -> int:
    """Count words in the rendered text of a markdown body."""
    tokens = _make_parser(parser_config).parse(markdown)
    return len(WORD_RE.findall(" ".join(_text_chunks(tokens))))


def reading_time(
    markdown: str,
    words_per_minute: int = WORDS_PER_MINUTE,
    parser_config: str = 'gfm-like',
    ) -> float:
    """Estimated minutes to read markdown: (words + 1) / words_per_minute, so an empty body is still positive."""
    if words_per_minute < 1:
        raise ValueError(f"words_per_minute must be >= 1, got {words_per_minute}")
    return (count_words(markdown, parser_config) + 1) / words_per_minute

"""Post discovery, document reads, and frontmatter splitting"""

import re
from pathlib import Path
from typing import Any

import yaml

from postindex.core.errors import ReadError
from postindex.core.models import PostSource


FRONTMATTER_RE = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*$\n?', re.DOTALL | re.MULTILINE)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed.

    Text without a leading `---` block yields ({}, text). Keys are always
    strings, even where YAML reads them as numbers or booleans. Raises ValueError
    on malformed YAML or a header that is not a mapping.
    """
    text = text.lstrip('\ufeff').replace('\r\n', '\n')
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return {str(k): v for k, v in fm.items()}, text[m.end():]


def discover_posts(root: Path) -> list[Path]:
    """Return immediate subdirectories of root, sorted by name. Files are ignored."""
    try:
        return sorted((p for p in root.iterdir() if p.is_dir()), key=lambda p: p.name)
    except OSError as e:
        raise ReadError(root, e) from e


def read_post(post_dir: Path, document_name: str = 'index.md') -> PostSource:
    """Read a post directory's document. Raises ReadError if missing or unreadable."""
    path = post_dir / document_name
    try:
        raw = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e
    return PostSource(slug=post_dir.name, path=path, raw_markdown=raw)

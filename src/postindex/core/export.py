"""Index serialization and atomic write of index.json"""

import json
import os
from pathlib import Path

from postindex.core.errors import WriteError
from postindex.core.models import PostSummary


def render_index(summaries: list[PostSummary]) -> str:
    """Return the index as a 2-space indented JSON array, in the order given."""
    return json.dumps([s.to_json() for s in summaries], indent=2, ensure_ascii=False)


def write_index(summaries: list[PostSummary], path: Path) -> Path:
    """Write summaries to path, replacing any existing file only once the new content is on disk.

    Returns path. Raises WriteError on any filesystem failure.
    """
    text = render_index(summaries)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_text(text, encoding='utf-8')
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise WriteError(path, e) from e
    return path

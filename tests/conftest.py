"""Root test configuration: environment isolation and a posts-tree builder"""

from pathlib import Path

import pytest

from postindex.config import ENV_PREFIX, Settings


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Drop POSTINDEX_* env vars and run from tmp_path so no config.yaml leaks in."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)


def render_post(
    title="Hello",
    description="World",
    published='"2024-01-01T00:00:00.000Z"',
    tags="[CSS]",
    body="Body text.\n",
    extra="",
    ) -> str:
    """Build an index.md document; pass None for a field to leave it out."""
    lines = ["---"]
    for key, value in (("title", title), ("description", description), ("published", published), ("tags", tags)):
        if value is not None:
            lines.append(f"{key}: {value}")
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    return "\n".join(lines) + "\n\n" + body


@pytest.fixture(name="posts_root")
def posts_root_fixture(tmp_path) -> Path:
    root = tmp_path / "posts"
    root.mkdir()
    return root


@pytest.fixture(name="write_post")
def write_post_fixture(posts_root):
    """Return a helper that creates <posts_root>/<slug>/index.md."""
    def _write(slug: str, text: str = None, **fields) -> Path:
        post_dir = posts_root / slug
        post_dir.mkdir(parents=True, exist_ok=True)
        doc = post_dir / "index.md"
        doc.write_text(text if text is not None else render_post(**fields), encoding="utf-8")
        return doc
    return _write

"""Data models for post sources, frontmatter, and index entries"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from postindex.core.utils.timestamps import format_timestamp, parse_timestamp


@dataclass
class PostSource:
    """Raw read result for one post directory; not persisted."""
    slug: str                  # post directory name
    path: Path                 # document path (<posts_root>/<slug>/index.md)
    raw_markdown: str          # full file content (includes frontmatter)


class Frontmatter(BaseModel):
    """Required post metadata. Unknown keys are kept and passed through."""
    model_config = ConfigDict(extra="allow")

    title:       str
    description: str
    published:   datetime
    tags:        list[str]

    @field_validator("published", mode="before")
    @classmethod
    def _decode_published(cls, value):
        return parse_timestamp(value)

    @field_serializer("published")
    def _encode_published(self, value: datetime) -> str:
        return format_timestamp(value)


class PostSummary(Frontmatter):
    """One entry of index.json: frontmatter plus slug and estimated reading time."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name:         str
    reading_time: float = Field(..., gt=0, alias="readingTime")

    @classmethod
    def from_post(cls, slug: str, frontmatter: Frontmatter, minutes: float) -> "PostSummary":
        """Combine validated frontmatter with derived fields; slug and reading time win over same-named keys."""
        data = frontmatter.model_dump()
        data.pop("reading_time", None)
        data.update(name=slug, readingTime=minutes)
        return cls.model_validate(data)

    def to_json(self) -> dict:
        """JSON-ready mapping with `readingTime` and an ISO `published`."""
        return self.model_dump(mode="json", by_alias=True)

"""Frontmatter decode/encode returning explicit Ok/Err results"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from postindex.core.models import Frontmatter


@dataclass(frozen=True)
class FieldError:
    """A single failed field; `field` is a dotted location (e.g. 'tags.1')."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class Ok:
    value: Frontmatter


@dataclass(frozen=True)
class Err:
    errors: list[FieldError] = field(default_factory=list)


def _field_errors(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(".".join(str(p) for p in err["loc"]) or "frontmatter", err["msg"])
        for err in exc.errors()
    ]


def decode_frontmatter(data: Any) -> Ok | Err:
    """Validate a parsed frontmatter mapping. Never raises on bad input."""
    if not isinstance(data, dict):
        return Err([FieldError("frontmatter", f"expected a mapping, got {type(data).__name__}")])
    try:
        return Ok(Frontmatter.model_validate({str(k): v for k, v in data.items()}))
    except ValidationError as e:
        return Err(_field_errors(e))


def encode_frontmatter(frontmatter: Frontmatter) -> dict[str, Any]:
    """Inverse of decode_frontmatter: JSON-ready mapping with `published` as text."""
    return frontmatter.model_dump(mode="json")

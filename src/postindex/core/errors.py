"""Exceptions raised while building the post index"""

from pathlib import Path


class PostIndexError(Exception):
    """Base class for all indexing failures."""


class ReadError(PostIndexError):
    """A post document (or the posts root itself) is missing or unreadable."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class SchemaValidationError(PostIndexError):
    """A post's frontmatter failed to parse or validate.

    `errors` holds one FieldError per offending field, in the order the
    validator reported them.
    """

    def __init__(self, slug: str, errors: list):
        self.slug = slug
        self.errors = list(errors)
        detail = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Invalid frontmatter in post '{slug}': {detail}")

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class WriteError(PostIndexError):
    """The index file could not be written."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write {path}: {cause}")


class IndexBuildError(PostIndexError):
    """One or more posts failed; nothing was written."""

    def __init__(self, errors: list[PostIndexError]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} post(s) failed to index")

"""Pipeline step functions: read, summarize, and build the post index"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from postindex.config import Settings
from postindex.core.errors import (
    IndexBuildError,
    PostIndexError,
    ReadError,
    SchemaValidationError,
)
from postindex.core.export import write_index
from postindex.core.models import PostSource, PostSummary
from postindex.core.parse import discover_posts, read_post, split_frontmatter
from postindex.core.schema import Err, FieldError, decode_frontmatter
from postindex.core.utils.reading_time import reading_time


@dataclass
class BuildResult:
    """Outcome of a build or check run."""
    posts: list[PostSummary] = field(default_factory=list)
    errors: list[PostIndexError] = field(default_factory=list)
    output_path: Path | None = None     # None when nothing was written


def _read(post_dir: Path, document_name: str) -> PostSource | ReadError:
    """Read one post, returning the ReadError instead of raising so all reads complete."""
    try:
        return read_post(post_dir, document_name)
    except ReadError as e:
        return e


def read_posts(posts_root: Path, document_name: str = 'index.md', max_workers: int = 8) -> list[PostSource | ReadError]:
    """Read every post document concurrently. Results follow directory (slug) order."""
    post_dirs = discover_posts(posts_root)
    if not post_dirs:
        return []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(post_dirs))) as pool:
        return list(pool.map(lambda d: _read(d, document_name), post_dirs))


def summarize_post(source: PostSource, words_per_minute: int = 200, parser_config: str = 'gfm-like') -> PostSummary:
    """Split, validate, and derive reading time for one post. Raises SchemaValidationError."""
    try:
        data, body = split_frontmatter(source.raw_markdown)
    except ValueError as e:
        raise SchemaValidationError(source.slug, [FieldError("frontmatter", str(e))]) from e

    result = decode_frontmatter(data)
    if isinstance(result, Err):
        raise SchemaValidationError(source.slug, result.errors)

    minutes = reading_time(body, words_per_minute, parser_config)
    return PostSummary.from_post(source.slug, result.value, minutes)


def check_index(posts_root: Path, settings: Settings = None) -> BuildResult:
    """Read and validate every post without writing.

    Every post is processed; failures are collected in BuildResult.errors
    rather than raised, so all problems are reported in one pass.
    """
    settings = settings or Settings()
    result = BuildResult()
    for item in read_posts(posts_root, settings.document_name, settings.max_workers):
        if isinstance(item, ReadError):
            result.errors.append(item)
            continue
        try:
            result.posts.append(summarize_post(item, settings.words_per_minute, settings.parser_config))
        except SchemaValidationError as e:
            result.errors.append(e)
    return result


def build_index(posts_root: Path, settings: Settings = None) -> BuildResult:
    """Build <posts_root>/<output_name> from every post directory.

    Any failed post raises IndexBuildError (listing all failures) and leaves
    the existing index untouched, unless settings.skip_invalid is set, in which
    case failed posts are left out and returned in BuildResult.errors.
    """
    settings = settings or Settings()
    result = check_index(posts_root, settings)
    if result.errors and not settings.skip_invalid:
        raise IndexBuildError(result.errors)
    result.output_path = write_index(result.posts, posts_root / settings.output_name)
    return result

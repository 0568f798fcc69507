"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from postindex.config import Settings, load_config
from postindex.core.errors import IndexBuildError, PostIndexError
from postindex.core.pipeline import BuildResult, build_index, check_index


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_errors(errors: list[PostIndexError], label: str) -> None:
    """Print one stderr line per failed post."""
    for err in errors:
        typer.echo(f"  {label}: {err}", err=True)


def _echo_posts(result: BuildResult) -> None:
    for post in result.posts:
        typer.echo(f"  {post.name}: {post.reading_time:.1f} min")


def build_cmd(
    posts_dir: Annotated[Optional[str], typer.Argument(help="Posts root (one subdirectory per post)")] = None,
    output: Annotated[Optional[str], typer.Option("--output-name", help="Index file name inside the posts root")] = None,
    wpm: Annotated[Optional[int], typer.Option("--words-per-minute", help="Reading speed for readingTime")] = None,
    workers: Annotated[Optional[int], typer.Option("--max-workers", help="Concurrent document reads")] = None,
    skip: Annotated[Optional[bool], typer.Option("--skip-invalid/--fail-fast", help="Skip invalid posts instead of aborting")] = None,
    ):
    """Read every post, validate frontmatter, and write the JSON index."""
    settings = _settings(overrides={
        "posts_dir": posts_dir, "output_name": output,
        "words_per_minute": wpm, "max_workers": workers, "skip_invalid": skip,
    })
    posts_root = Path(settings.posts_dir)

    try:
        result = build_index(posts_root, settings)
    except IndexBuildError as e:
        _echo_errors(e.errors, "failed")
        _fail(f"{e}; {settings.output_name} not written")
    except PostIndexError as e:
        _fail("Build failed", e)

    _echo_errors(result.errors, "skipped")
    _echo_posts(result)
    typer.echo(f"Indexed {len(result.posts)} post(s) to {result.output_path}")


def check_cmd(
    posts_dir: Annotated[Optional[str], typer.Argument(help="Posts root (one subdirectory per post)")] = None,
    wpm: Annotated[Optional[int], typer.Option("--words-per-minute", help="Reading speed for readingTime")] = None,
    workers: Annotated[Optional[int], typer.Option("--max-workers", help="Concurrent document reads")] = None,
    ):
    """Validate every post without writing the index."""
    settings = _settings(overrides={"posts_dir": posts_dir, "words_per_minute": wpm, "max_workers": workers})
    posts_root = Path(settings.posts_dir)

    try:
        result = check_index(posts_root, settings)
    except PostIndexError as e:
        _fail("Check failed", e)

    _echo_posts(result)
    if result.errors:
        _echo_errors(result.errors, "failed")
        _fail(f"{len(result.errors)} of {len(result.posts) + len(result.errors)} post(s) invalid")
    typer.echo(f"All {len(result.posts)} post(s) valid.")

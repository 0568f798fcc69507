"""Unit tests for config.py"""

import pytest

from postindex.config import load_config


def test_load_config_defaults():
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.posts_dir == "posts"
    assert settings.document_name == "index.md"
    assert settings.output_name == "index.json"
    assert settings.words_per_minute == 200
    assert settings.skip_invalid is False


def test_load_config_uses_env_posts_dir(monkeypatch):
    """POSTINDEX_POSTS_DIR env var is picked up by load_config."""
    monkeypatch.setenv("POSTINDEX_POSTS_DIR", "content/posts")
    assert load_config().posts_dir == "content/posts"


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("posts_dir: blog\nwords_per_minute: 250\n")
    settings = load_config()
    assert settings.posts_dir == "blog"
    assert settings.words_per_minute == 250


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """POSTINDEX_WORDS_PER_MINUTE takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("words_per_minute: 250\n")
    monkeypatch.setenv("POSTINDEX_WORDS_PER_MINUTE", "180")
    assert load_config().words_per_minute == 180


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("POSTINDEX_OUTPUT_NAME", "env.json")
    settings = load_config(overrides={"output_name": "cli.json", "posts_dir": None})
    assert settings.output_name == "cli.json"
    assert settings.posts_dir == "posts"


def test_load_config_env_bool(monkeypatch):
    """POSTINDEX_SKIP_INVALID is coerced to bool."""
    monkeypatch.setenv("POSTINDEX_SKIP_INVALID", "true")
    assert load_config().skip_invalid is True


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- posts\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"words_per_minute": 0},
    {"max_workers": 0},
    {"output_name": "nested/index.json"},
    {"output_name": "index.txt"},
    {"parser_config": "bogus"},
])
def test_load_config_rejects_invalid_values(overrides):
    """Out-of-range or malformed settings raise a ValueError (pydantic ValidationError)."""
    with pytest.raises(ValueError):
        load_config(overrides=overrides)

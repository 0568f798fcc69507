"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "POSTINDEX_"


class Settings(BaseModel):
    posts_dir:        str  = Field(default="posts",      description="Posts root; one subdirectory per post")
    document_name:    str  = Field(default="index.md",   description="Document file inside each post directory")
    output_name:      str  = Field(default="index.json", pattern=r"^[^/\\]+\.json$", description="Index file written inside the posts root")
    words_per_minute: int  = Field(default=200, ge=1,    description="Reading speed used for readingTime")
    parser_config:    str  = Field(default="gfm-like", pattern="^(commonmark|default|gfm-like|js-default|zero)$", description="MarkdownIt parser preset name")
    max_workers:      int  = Field(default=8,   ge=1,    description="Concurrent document reads")
    skip_invalid:     bool = Field(default=False,        description="Skip invalid posts with a warning instead of aborting")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then POSTINDEX_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

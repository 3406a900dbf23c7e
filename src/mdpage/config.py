"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional, get_origin

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDPAGE_"


class Settings(BaseModel):
    app_name:       str = "mdpage"
    parser_config:  str = Field(default="gfm-like",  description="MarkdownIt parser preset name")
    default_layout: str = Field(default="default",   description="Layout used when front matter names none")
    layouts_dir:    Optional[str] = Field(default=None, description="Directory searched for <name>.html layouts first")
    style_mode:     str = Field(default="inline", pattern="^(inline|link)$", description="inline or link")
    stylesheets:    list[str] = Field(default_factory=list, description="Site-wide stylesheets, skipped by layout: none")
    builtin_styles: bool = Field(default=True,       description="Embed the built-in base stylesheet in the default layout")
    heading_ids:    bool = Field(default=True,       description="Add slug id attributes to headings")
    site_title:     str = Field(default="",          description="Site name shown in layout chrome and title fallback")
    lang:           str = Field(default="en",        description="Default <html lang> value")
    output_dir:     str = Field(default="dist",      description="Directory for rendered HTML files")
    log_level:      str = Field(default="WARNING",   description="Logging level used by the CLI")


def _env_value(name: str, raw: str) -> Any:
    """Split comma-separated env values for list fields; pass others through for pydantic."""
    if get_origin(Settings.model_fields[name].annotation) is list:
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPAGE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

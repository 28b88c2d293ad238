"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from safeslug.core.models import SlugOptions


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "SAFESLUG_"


class Settings(BaseModel):
    separator:     str  = Field(default="-", min_length=1, max_length=1, description="Separator character")
    max_length:    int  = Field(default=0, ge=0, description="Max slug bytes; 0 = unlimited")
    preserve_case: bool = Field(default=False, description="Keep case and raw non-ASCII characters")
    table_path:    Optional[str] = Field(default=None, description="YAML transliteration table; bundled table if unset")

    def options(self) -> SlugOptions:
        return SlugOptions(
            separator=self.separator,
            max_length=self.max_length,
            preserve_case=self.preserve_case,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then SAFESLUG_<FIELD> env vars, then non-None CLI overrides."""
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

"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    root:           str = Field(default=".", description="Repository root to index")
    ignore:         list[str] = Field(default_factory=lambda: ["node_modules", "__pycache__"],
                                      description="Directory or file names skipped while indexing")
    skip_unknown:   bool = Field(default=False, description="Drop items whose source file is not a known marker")
    extract_blocks: bool = Field(default=True, description="Populate title/description/content blocks")
    parser_config:  str = Field(default="gfm-like",   description="MarkdownIt parser preset name")
    log_level:      str = Field(default="warning", pattern="^(debug|info|warning|error)$")
    log_json:       bool = Field(default=False, description="Emit JSON log lines instead of console output")

    @field_validator("ignore", mode="before")
    @classmethod
    def _split_ignore(cls, v: Any) -> Any:
        """Accept a comma-separated string (as supplied via env vars)."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDINDEX_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDINDEX_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

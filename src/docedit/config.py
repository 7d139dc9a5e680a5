"""Application configuration: settings schema and config.yaml loader"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCEDIT_"


class Settings(BaseModel):
    app_name:            str = "docedit"
    output_dir:          str = Field(default=".",  description="Directory the exported document is saved to")
    output_filename:     str = Field(default="edited-document.docx", pattern=r".+\.docx$", description="Fixed export file name")
    accepted_extensions: list[str] = Field(default=[".docx"], min_length=1, description="File extensions accepted on import")
    preserve_inline:     bool = Field(default=True, description="Keep nested bold/italic runs; False flattens each block to one run")
    document_timestamp:  datetime = Field(default=datetime(2000, 1, 1), description="Pinned created/modified time of exported files")
    document_author:     str = Field(default="docedit", description="Author written to exported core properties")
    log_level:           str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("accepted_extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: Any) -> Any:
        """Accept a comma-separated string (env vars) and normalise to '.ext' lower-case."""
        if isinstance(value, str):
            value = [v for v in value.split(",") if v.strip()]
        if isinstance(value, list):
            value = [("." + str(v).strip().lstrip(".")).lower() for v in value]
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCEDIT_<FIELD> env vars, then non-None overrides."""
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

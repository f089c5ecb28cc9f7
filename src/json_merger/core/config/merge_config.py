"""Merge run configuration.

Settings are layered: built-in defaults, then an optional YAML file, then
explicit command-line overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from json_merger.exceptions import ConfigError

DEFAULT_INPUT_DIR = Path("./input")
DEFAULT_OUTPUT_DIR = Path("./output")
DEFAULT_OUTPUT_FILENAME = "merged.json"


class MergeConfig(BaseModel):
    """Configuration for a single merge run."""

    model_config = ConfigDict(extra="forbid")

    input_dir: Path = DEFAULT_INPUT_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    sort_files: bool = True

    @field_validator("output_filename")
    @classmethod
    def validate_output_filename(cls, value: str) -> str:
        """Require a bare file name; the directory comes from output_dir."""
        if not value.strip():
            raise ValueError("output_filename must not be empty")
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(
                f"output_filename must be a file name, not a path: {value!r}"
            )
        return value

    @property
    def output_path(self) -> Path:
        """Full path of the merged output file."""
        return self.output_dir / self.output_filename


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load merge settings from a YAML file.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does
            not contain a mapping.
    """
    config_path = Path(path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def resolve_config(
    file_settings: dict[str, Any] | None = None, **overrides: Any
) -> MergeConfig:
    """Build a MergeConfig from file settings and explicit overrides.

    Overrides whose value is None are ignored so that unset CLI options
    fall through to the file settings and then to the defaults.
    """
    settings: dict[str, Any] = dict(file_settings or {})
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return MergeConfig(**settings)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

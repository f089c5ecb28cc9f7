"""Configuration models for json-merger."""

from .merge_config import MergeConfig, load_config_file, resolve_config

__all__ = ["MergeConfig", "load_config_file", "resolve_config"]

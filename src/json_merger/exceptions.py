"""Exceptions raised by json-merger.

Only process-terminating conditions are modelled as exceptions. Per-file
read and parse failures are reported through the ``read_json`` primitive's
output contract instead.
"""

from __future__ import annotations

from pathlib import Path


class JsonMergerError(Exception):
    """Base class for fatal json-merger errors."""


class InputNotFoundError(JsonMergerError):
    """The configured input directory does not exist."""

    def __init__(self, input_dir: Path) -> None:
        super().__init__(f'Input directory "{input_dir}" does not exist')
        self.input_dir = input_dir


class NoInputFilesError(JsonMergerError):
    """The input directory contains no JSON files."""

    def __init__(self, input_dir: Path) -> None:
        super().__init__(f'No JSON files found in "{input_dir}"')
        self.input_dir = input_dir


class OutputWriteError(JsonMergerError):
    """The merged document could not be written."""

    def __init__(self, output_path: Path, reason: str) -> None:
        super().__init__(f'Failed to write "{output_path}": {reason}')
        self.output_path = output_path
        self.reason = reason


class ConfigError(JsonMergerError):
    """A configuration file or setting is invalid."""

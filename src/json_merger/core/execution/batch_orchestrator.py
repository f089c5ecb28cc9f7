"""Batch orchestration: discover, load, fold and persist JSON documents."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from json_merger.core.config.merge_config import MergeConfig
from json_merger.core.execution.file_discovery import discover_json_files
from json_merger.core.merge_engine import JsonValue, deep_merge, is_json_object
from json_merger.exceptions import (
    InputNotFoundError,
    NoInputFilesError,
    OutputWriteError,
)
from json_merger.primitives.file_ops import read_json, write_json

logger = logging.getLogger(__name__)

EmitEventFn = Callable[[str, dict[str, Any]], None]


class SkippedFile(BaseModel):
    """An input file left out of the merge."""

    path: str
    error: str


class MergeReport(BaseModel):
    """Outcome of a successful merge run."""

    output_path: str
    files_found: int
    files_merged: int
    skipped: list[SkippedFile] = Field(default_factory=list)
    merged: Any = Field(default_factory=dict, exclude=True)


def _no_op_emit(event_type: str, data: dict[str, Any]) -> None:
    pass


class BatchOrchestrator:
    """Folds every JSON file under an input directory into one document.

    Files are processed one at a time in discovery order. A file that cannot
    be read or parsed is reported through a ``file_skipped`` event and left
    out; the run continues with the remaining files.
    """

    def __init__(
        self,
        config: MergeConfig,
        emit_event_fn: EmitEventFn | None = None,
    ) -> None:
        self._config = config
        self._emit_event = emit_event_fn or _no_op_emit

    @property
    def config(self) -> MergeConfig:
        """The configuration this orchestrator runs with."""
        return self._config

    def run(self) -> MergeReport:
        """Execute the merge run.

        Raises:
            InputNotFoundError: If the input directory does not exist.
            NoInputFilesError: If no JSON files were found.
            OutputWriteError: If the merged document could not be written.
        """
        config = self._config
        input_dir = config.input_dir

        if not input_dir.is_dir():
            raise InputNotFoundError(input_dir)

        self._ensure_output_dir(config.output_dir)

        files = discover_json_files(
            input_dir,
            sort_files=config.sort_files,
            exclude=[config.output_path],
        )
        if not files:
            raise NoInputFilesError(input_dir)

        logger.info("Found %d JSON files in %s", len(files), input_dir)
        self._emit_event("files_discovered", {"count": len(files)})

        merged, skipped = self._fold_files(input_dir, files)
        output_path = self._write_output(merged)

        files_merged = len(files) - len(skipped)
        self._emit_event(
            "merge_completed",
            {
                "output_path": str(output_path),
                "files_merged": files_merged,
                "files_found": len(files),
            },
        )
        return MergeReport(
            output_path=str(output_path),
            files_found=len(files),
            files_merged=files_merged,
            skipped=skipped,
            merged=merged,
        )

    def _ensure_output_dir(self, output_dir: Path) -> None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(output_dir, str(e)) from e

    def _fold_files(
        self, input_dir: Path, files: list[Path]
    ) -> tuple[JsonValue, list[SkippedFile]]:
        """Merge each file onto the accumulator in order."""
        accumulator: JsonValue = {}
        skipped: list[SkippedFile] = []

        for relative in files:
            name = relative.as_posix()
            result = read_json.execute(
                read_json.ReadJsonInput(path=str(input_dir / relative))
            )
            if not result.success:
                error = result.error or "unknown error"
                logger.info("Skipping %s: %s", name, error)
                skipped.append(SkippedFile(path=name, error=error))
                self._emit_event("file_skipped", {"file": name, "error": error})
                continue

            if not is_json_object(result.data):
                logger.warning(
                    "%s is not a JSON object and contributes nothing", name
                )
            accumulator = deep_merge(accumulator, result.data)
            logger.debug("Merged %s (%d chars)", name, result.size)
            self._emit_event("file_merged", {"file": name})

        return accumulator, skipped

    def _write_output(self, merged: JsonValue) -> Path:
        output_path = self._config.output_path
        result = write_json.execute(
            write_json.WriteJsonInput(path=str(output_path), data=merged)
        )
        if not result.success:
            raise OutputWriteError(output_path, result.error or "unknown error")

        logger.debug("Wrote %d bytes to %s", result.bytes_written, output_path)
        return output_path


def merge_directory(
    config: MergeConfig, emit_event_fn: EmitEventFn | None = None
) -> MergeReport:
    """Run a merge with the given configuration."""
    return BatchOrchestrator(config, emit_event_fn).run()

"""Command line interface for json-merger."""

from pathlib import Path
from typing import Any

import click

from json_merger.cli_modules.utils.cli_utils import (
    configure_logging,
    echo_error,
    echo_info,
    echo_success,
)
from json_merger.cli_modules.utils.results_display import display_merged_document
from json_merger.core.config.merge_config import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_FILENAME,
    load_config_file,
    resolve_config,
)
from json_merger.core.execution.batch_orchestrator import merge_directory
from json_merger.exceptions import JsonMergerError


def _echo_event(event_type: str, data: dict[str, Any]) -> None:
    """Render orchestrator events as console lines."""
    if event_type == "files_discovered":
        echo_info(f"Found {data['count']} JSON files to merge")
    elif event_type == "file_merged":
        click.echo(f"Merged: {data['file']}")
    elif event_type == "file_skipped":
        echo_error(f"Error processing file {data['file']}: {data['error']}")
    elif event_type == "merge_completed":
        echo_success(
            f"Successfully merged {data['files_merged']} of "
            f"{data['files_found']} files into {data['output_path']}"
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-merger")
@click.option(
    "--input",
    "-i",
    "input_dir",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Directory scanned for JSON files [default: {DEFAULT_INPUT_DIR}]",
)
@click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Directory for the merged file [default: {DEFAULT_OUTPUT_DIR}]",
)
@click.option(
    "--filename",
    "-f",
    "output_filename",
    default=None,
    help=f"Name of the output file [default: {DEFAULT_OUTPUT_FILENAME}]",
)
@click.option(
    "--no-sort",
    is_flag=True,
    help="Merge files in filesystem order instead of sorted path order",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="YAML file with input_dir, output_dir, output_filename, sort_files",
)
@click.option(
    "--print",
    "-p",
    "print_result",
    is_flag=True,
    help="Print the merged document to stdout",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    input_dir: Path | None,
    output_dir: Path | None,
    output_filename: str | None,
    no_sort: bool,
    config_file: Path | None,
    print_result: bool,
    verbose: bool,
) -> None:
    """Deep-merge every JSON file under a directory into one document."""
    configure_logging(verbose)

    try:
        file_settings = load_config_file(config_file) if config_file else None
        config = resolve_config(
            file_settings,
            input_dir=input_dir,
            output_dir=output_dir,
            output_filename=output_filename,
            sort_files=False if no_sort else None,
        )
        report = merge_directory(config, emit_event_fn=_echo_event)
    except JsonMergerError as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:
        raise click.ClickException(f"Merge failed: {e}") from e

    if print_result:
        display_merged_document(report.merged)


if __name__ == "__main__":
    cli()

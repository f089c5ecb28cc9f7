"""Common CLI utility functions."""

import logging

import click

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def echo_success(message: str) -> None:
    """Echo a success message with consistent formatting.

    Args:
        message: Success message to display
    """
    click.echo(f"✅ {message}")


def echo_error(message: str) -> None:
    """Echo an error message to stderr with consistent formatting.

    Args:
        message: Error message to display
    """
    click.echo(f"❌ {message}", err=True)


def echo_info(message: str) -> None:
    """Echo an info message with consistent formatting.

    Args:
        message: Info message to display
    """
    click.echo(f"ℹ️  {message}")


def configure_logging(verbose: bool) -> None:
    """Send library logging to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    logging.getLogger("json_merger").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )

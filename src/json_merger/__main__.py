"""Allow ``python -m json_merger``."""

from json_merger.cli import cli

if __name__ == "__main__":
    cli()

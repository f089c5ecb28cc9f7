"""Rich display of merge results."""

import json
from typing import Any

from rich.console import Console


def display_merged_document(document: Any) -> None:
    """Pretty-print the merged document to stdout."""
    console = Console(soft_wrap=True, highlight=False)
    console.print_json(json.dumps(document, ensure_ascii=False), indent=2)

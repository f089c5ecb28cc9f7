"""Read JSON primitive with Pydantic contracts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class ReadJsonInput(BaseModel):
    """Input contract for read_json."""

    path: str
    encoding: str = "utf-8"


class ReadJsonOutput(BaseModel):
    """Output contract for read_json.

    ``data`` holds the parsed document; it is only meaningful when
    ``success`` is True since ``null`` is itself a valid document.
    """

    success: bool
    data: Any = None
    path: str = ""
    size: int = 0
    error: str | None = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def execute(params: ReadJsonInput) -> ReadJsonOutput:
    """Execute read_json.

    Unreadable files and invalid JSON are reported, never raised. Only
    standard JSON is accepted: ``NaN``, ``Infinity`` and ``-Infinity`` are
    parse errors, as is nesting too deep for the decoder.
    """
    try:
        content = Path(params.path).read_text(encoding=params.encoding)
        data = json.loads(content, parse_constant=_reject_constant)
    except (OSError, ValueError, RecursionError) as e:
        return ReadJsonOutput(
            success=False,
            error=str(e),
            path=params.path,
        )

    return ReadJsonOutput(
        success=True,
        data=data,
        path=params.path,
        size=len(content),
    )

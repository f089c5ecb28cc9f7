"""Write JSON primitive with Pydantic contracts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class WriteJsonInput(BaseModel):
    """Input contract for write_json."""

    path: str
    data: Any
    indent: int = 2
    encoding: str = "utf-8"


class WriteJsonOutput(BaseModel):
    """Output contract for write_json."""

    success: bool
    path: str = ""
    size: int = 0
    bytes_written: int = 0
    error: str | None = None


def serialize(data: Any, indent: int = 2) -> str:
    """Serialize a document the way merged output is written.

    Raises ValueError for NaN or infinite floats, which JSON cannot represent.
    """
    return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)


def execute(params: WriteJsonInput) -> WriteJsonOutput:
    """Execute write_json.

    Creates missing parent directories and replaces any existing file.
    """
    try:
        content = serialize(params.data, params.indent)
        target = Path(params.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding=params.encoding)
    except (OSError, ValueError, TypeError) as e:
        return WriteJsonOutput(
            success=False,
            error=str(e),
            path=params.path,
        )

    return WriteJsonOutput(
        success=True,
        path=params.path,
        size=len(content),
        bytes_written=len(content.encode(params.encoding)),
    )

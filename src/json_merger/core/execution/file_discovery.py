"""Discovery of JSON input files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

JSON_PATTERN = "*.json"


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def discover_json_files(
    input_dir: Path,
    *,
    sort_files: bool = True,
    exclude: Iterable[Path] = (),
) -> list[Path]:
    """Find JSON files under input_dir, recursively.

    Hidden files and anything under a hidden directory are skipped, as are
    directories whose names happen to end in ``.json``.

    Args:
        input_dir: Directory to scan.
        sort_files: Sort by relative POSIX path. When False the filesystem's
            traversal order is kept, which varies between platforms.
        exclude: Paths to leave out, e.g. a previous output file that lives
            inside the input directory.

    Returns:
        Paths relative to input_dir.
    """
    excluded = {path.resolve() for path in exclude}
    found: list[Path] = []

    for path in input_dir.rglob(JSON_PATTERN):
        relative = path.relative_to(input_dir)
        if _is_hidden(relative) or not path.is_file():
            continue
        if excluded and path.resolve() in excluded:
            continue
        found.append(relative)

    if sort_files:
        found.sort(key=lambda p: p.as_posix())
    return found

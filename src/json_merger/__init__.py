"""JSON Merger - fold a directory of JSON documents into one."""

from importlib.metadata import PackageNotFoundError, version

from json_merger.core.merge_engine import deep_merge, fold

try:
    __version__ = version("json-merger")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"

__all__ = ["deep_merge", "fold", "__version__"]

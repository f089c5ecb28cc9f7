"""Batch execution: file discovery and folding."""

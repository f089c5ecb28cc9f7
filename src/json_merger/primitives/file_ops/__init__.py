"""File I/O primitives."""

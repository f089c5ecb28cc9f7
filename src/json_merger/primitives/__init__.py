"""Primitives package — the merge pipeline's building blocks.

Provides Pydantic-contracted primitives that define the I/O contracts of a
merge run. Each primitive has Input/Output models and an execute() function.
"""

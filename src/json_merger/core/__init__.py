"""Core merge engine, configuration and batch execution."""

"""Dashed-stroke conversion for straight-line paths."""

__version__ = "0.1.0"

"""Compile nested JSON translations into Python accessor functions."""

__version__ = "0.1.0"

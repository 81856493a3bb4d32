"""Loresearch: keyword search and highlighting over a nested record store."""

__version__ = "1.0.0"

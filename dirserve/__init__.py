"""Serve files and directory listings from the current working directory."""

__version__ = "0.1.0"

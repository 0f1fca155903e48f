"""Minimal authenticated CMS backend publishing Hugo content files."""

__version__ = "0.1.0"

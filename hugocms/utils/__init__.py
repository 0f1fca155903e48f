"""Small filesystem and request helpers shared by the CMS layers."""

__all__ = [
    "fs",
    "http",
]

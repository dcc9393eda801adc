"""CLI commands for sass-importer."""

__all__ = [
    "compile",
    "config",
    "resolve",
]

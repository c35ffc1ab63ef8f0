"""Shared helpers (logging setup)."""

from .logging import JsonFormatter, PackageStreamHandler, setup_logging

__all__ = [
    'JsonFormatter',
    'PackageStreamHandler',
    'setup_logging',
]

"""Observability infrastructure: logging setup for engine applications."""

from .logging import setup_logging

__all__ = [
    'setup_logging',
]

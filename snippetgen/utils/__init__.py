"""Shared utility modules for the snippet generator."""

from .source_loader import SourceLoader, SourceUnit

__all__ = [
    "SourceLoader",
    "SourceUnit",
]

"""Data models for import results."""

from .result import ImportErrorKind, ImportResult

__all__ = [
    "ImportErrorKind",
    "ImportResult",
]

"""Utility modules for recording paths."""

from .paths import metadata_path, validate_meeting_id

__all__ = [
    "metadata_path",
    "validate_meeting_id",
]

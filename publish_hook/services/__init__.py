"""Service modules for external integrations."""

from .importer import RecordingsImportService

__all__ = ["RecordingsImportService"]

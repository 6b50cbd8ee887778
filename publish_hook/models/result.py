"""Import result data models."""

from dataclasses import dataclass
from enum import Enum


class ImportErrorKind(Enum):
    """Failure classes of a metadata import, with their process exit codes."""

    CONFIG = 3
    INVALID_ID = 4
    METADATA_MISSING = 5
    CONNECTION = 6
    TLS = 7
    TIMEOUT = 8
    HTTP_STATUS = 9
    REQUEST = 10

    @property
    def exit_code(self) -> int:
        return self.value


@dataclass
class ImportResult:
    """Outcome of uploading one recording's metadata.xml."""

    meeting_id: str
    url: str
    status_code: int | None = None  # None when no response was received
    error_kind: ImportErrorKind | None = None
    error: str | None = None
    record_id: str | None = None  # RecordID of the recording echoed by the import API

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @property
    def exit_code(self) -> int:
        """Process exit status for this result (0 on success)."""
        if self.error_kind is None:
            return 0
        return self.error_kind.exit_code

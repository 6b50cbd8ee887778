"""Path helpers for published recordings."""

from pathlib import Path

METADATA_FILENAME = "metadata.xml"

# Characters that would let a recording id escape the published directory
FORBIDDEN_CHARS = ("/", "\\", "\x00")


def validate_meeting_id(meeting_id: str) -> str:
    """Check that a recording id is usable as a single path component.

    Raises:
        ValueError: If the id is empty, a relative directory reference,
            or contains a path separator.
    """
    if not meeting_id:
        raise ValueError("Recording id must not be empty")
    if meeting_id in (".", ".."):
        raise ValueError(f"Invalid recording id: '{meeting_id}'")
    if any(c in meeting_id for c in FORBIDDEN_CHARS):
        raise ValueError(f"Recording id must not contain path separators: '{meeting_id}'")
    return meeting_id


def metadata_path(published_dir: Path, meeting_id: str) -> Path:
    """Return the metadata.xml location of a published recording."""
    return Path(published_dir) / validate_meeting_id(meeting_id) / METADATA_FILENAME

#!/usr/bin/env python3
"""
Post-publish import hook for b3scale

Reads the metadata.xml of a freshly published recording and uploads it
to the b3scale recordings import API. The exit status reports the outcome.
"""

import argparse
import sys
from pathlib import Path

from .config import Config, configure_logging
from .models.result import ImportErrorKind
from .services.importer import RecordingsImportService
from .utils.paths import metadata_path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Import a published recording into b3scale"
    )
    parser.add_argument(
        "-m",
        "--meeting-id",
        required=True,
        help="Recording id to import",
    )
    parser.add_argument(
        "-f",
        "--format",
        help="Playback format name (accepted, not used)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Load configuration from this dotenv file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(argv)

    try:
        config = Config.from_environment(args.env_file)
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ImportErrorKind.CONFIG.exit_code

    logger = configure_logging(config.paths.log_file, verbose=args.verbose)
    logger.info(
        f"Post-publish hook started for recording {args.meeting_id}"
        + (f" (format: {args.format})" if args.format else "")
    )

    try:
        metadata_file = metadata_path(config.paths.published_dir, args.meeting_id)
    except ValueError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return ImportErrorKind.INVALID_ID.exit_code

    importer = RecordingsImportService(config.api, logger)
    result = importer.upload_metadata(args.meeting_id, metadata_file)

    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())

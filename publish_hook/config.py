"""Configuration management for the post-publish import hook."""

import logging
import math
import os
import sys
from dataclasses import dataclass
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_API_URL = "https://bbb.example.com"
DEFAULT_PUBLISHED_DIR = Path("/var/bigbluebutton/published/presentation")
DEFAULT_LOG_FILE = Path("/var/log/bigbluebutton/post_publish.log")
DEFAULT_TIMEOUT = 60.0

IMPORT_RESOURCE = "api/v1/recordings-import"

LOGGER_NAME = "publish_hook"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ImportAPIConfig:
    """b3scale recordings import API configuration."""

    api_url: str
    access_token: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def import_url(self) -> str:
        """Full URL of the recordings import endpoint."""
        return f"{self.api_url.rstrip('/')}/{IMPORT_RESOURCE}"

    def validate(self) -> None:
        """Validate the API settings."""
        if not self.access_token:
            raise ValueError("B3SCALE_API_ACCESS_TOKEN is required")
        if not self.api_url.startswith(("http://", "https://")):
            raise ValueError(
                f"B3SCALE_API_URL must be an http(s) URL, got '{self.api_url}'"
            )
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError("B3SCALE_HTTP_REQUEST_TIMEOUT must be a positive, finite number")


@dataclass
class PathConfig:
    """File path configuration."""

    published_dir: Path
    log_file: Path


@dataclass
class Config:
    """Main configuration container."""

    api: ImportAPIConfig
    paths: PathConfig

    @classmethod
    def from_environment(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        access_token = os.getenv("B3SCALE_API_ACCESS_TOKEN")
        if not access_token:
            raise ValueError(
                "Missing required environment variable. "
                "Please set B3SCALE_API_ACCESS_TOKEN"
            )

        raw_timeout = os.getenv("B3SCALE_HTTP_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"B3SCALE_HTTP_REQUEST_TIMEOUT must be a number of seconds, got '{raw_timeout}'"
            ) from None

        return cls(
            api=ImportAPIConfig(
                api_url=os.getenv("B3SCALE_API_URL", DEFAULT_API_URL),
                access_token=access_token,
                timeout=timeout,
            ),
            paths=PathConfig(
                published_dir=Path(
                    os.getenv("B3SCALE_RECORDINGS_PUBLISHED_PATH", str(DEFAULT_PUBLISHED_DIR))
                ),
                log_file=Path(os.getenv("B3SCALE_POST_PUBLISH_LOG", str(DEFAULT_LOG_FILE))),
            ),
        )

    def validate(self) -> None:
        """Validate the configuration."""
        self.api.validate()


def configure_logging(log_file: Path, verbose: bool = False) -> logging.Logger:
    """Create the hook's logger, writing to a weekly rotated log file.

    The logger is returned rather than installed on the root logger, so
    callers hand it to whatever needs it. Falls back to stderr when the
    log file cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    try:
        handler: logging.Handler = TimedRotatingFileHandler(
            log_file, when="W0", encoding="utf-8"
        )
    except OSError as e:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.warning(f"Could not open log file {log_file}, logging to stderr: {e}")
        return logger

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger

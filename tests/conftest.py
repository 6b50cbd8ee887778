"""Shared pytest fixtures for the post-publish hook tests."""

import sys
from pathlib import Path

import pytest

# Add parent dir to path so publish_hook is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

import publish_hook.config as config_module

HOOK_ENV_VARS = (
    "B3SCALE_API_URL",
    "B3SCALE_API_ACCESS_TOKEN",
    "B3SCALE_HTTP_REQUEST_TIMEOUT",
    "B3SCALE_RECORDINGS_PUBLISHED_PATH",
    "B3SCALE_POST_PUBLISH_LOG",
)

TEST_TOKEN = "test-access-token"
METADATA_XML = b"<recording><id>abc-123</id><published>true</published></recording>\n"


@pytest.fixture
def access_token():
    """Bearer token configured for the hook under test."""
    return TEST_TOKEN


@pytest.fixture
def metadata_xml():
    """Contents of the published metadata.xml for recording abc-123."""
    return METADATA_XML


@pytest.fixture
def clean_env(monkeypatch):
    """Remove hook settings from the environment.

    Each variable is set before being deleted so monkeypatch restores the
    original state, including values written later by load_dotenv.
    """
    for name in HOOK_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield monkeypatch


@pytest.fixture
def no_dotenv(monkeypatch):
    """Stop Config.from_environment from reading a stray .env file."""
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def published_dir(tmp_path):
    """A published presentation directory holding recording abc-123."""
    root = tmp_path / "published" / "presentation"
    recording_dir = root / "abc-123"
    recording_dir.mkdir(parents=True)
    (recording_dir / "metadata.xml").write_bytes(METADATA_XML)
    return root


@pytest.fixture
def hook_env(clean_env, no_dotenv, published_dir, tmp_path):
    """Environment for a complete hook run against published_dir."""
    clean_env.setenv("B3SCALE_API_URL", "https://bbb.example.com")
    clean_env.setenv("B3SCALE_API_ACCESS_TOKEN", TEST_TOKEN)
    clean_env.setenv("B3SCALE_RECORDINGS_PUBLISHED_PATH", str(published_dir))
    clean_env.setenv("B3SCALE_POST_PUBLISH_LOG", str(tmp_path / "post_publish.log"))
    return clean_env

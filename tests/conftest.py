"""
Shared pytest fixtures for afwk test suite.

Provides fixtures for:
- Temporary storage directories
- Workspaces and schemas
- Recording host collaborators
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from afwk_library.models.schema import Schema
from afwk_library.storage.filesystem import LocalFileSystem
from afwk_library.storage.preferences import JsonPreferenceStore


class RecordingNotifier:
    """Notifier that keeps every message for assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class CountingFileSystem(LocalFileSystem):
    """LocalFileSystem that records which paths were probed."""

    def __init__(self) -> None:
        self.probed: list[str] = []

    def exists(self, path: str) -> bool:
        self.probed.append(path)
        return super().exists(path)


@pytest.fixture
def temp_storage_dir() -> Generator[Path, None, None]:
    """Create temporary storage directory for tests.

    Automatically cleaned up after test completes.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_storage_env(temp_storage_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Mock AFWK_HOME environment variable to use temp directory.

    This ensures tests use isolated storage and don't interfere with
    real data or other tests.

    Returns:
        Path to temporary storage directory
    """
    monkeypatch.setenv("AFWK_HOME", str(temp_storage_dir))
    for name in ("AFWK_CONFIG_DIR", "AFWK_STATE_DIR", "AFWK_LOG_DIR", "AFWK_SCHEMA_PATH", "AFWK_WORKSPACE_PATH"):
        monkeypatch.delenv(name, raising=False)
    return temp_storage_dir


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create an empty workspace directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project.resolve()


@pytest.fixture
def small_schema() -> Schema:
    """Schema with root .afwk and one directory holding one file."""
    return Schema.model_validate(
        {
            "version": "1.0.0",
            "root": ".afwk",
            "directories": {
                "steering": {
                    "description": "Project guidance documents",
                    "files": {"tech.md": "Technology stack"},
                },
            },
        }
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def counting_fs() -> CountingFileSystem:
    return CountingFileSystem()


@pytest.fixture
def preference_store_factory(tmp_path: Path):
    """Build preference stores under an isolated directory."""
    preferences_dir = tmp_path / "preferences"

    def factory(workspace_root: Path) -> JsonPreferenceStore:
        return JsonPreferenceStore(workspace_root, preferences_dir=preferences_dir)

    return factory

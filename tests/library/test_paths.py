"""
Unit tests for storage path resolution.
"""

from pathlib import Path

import pytest

from afwk_library.storage import paths


@pytest.mark.unit
class TestPaths:
    """Test path resolution functions."""

    def test_get_home_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_home_dir returns .afwkd when env var not set."""
        monkeypatch.delenv("AFWK_HOME", raising=False)

        assert paths.get_home_dir() == Path(".afwkd").resolve()

    def test_get_home_dir_custom(self, mock_storage_env: Path) -> None:
        """Test get_home_dir respects AFWK_HOME environment variable."""
        assert paths.get_home_dir() == mock_storage_env

    def test_get_config_dir_creates_directory(self, mock_storage_env: Path) -> None:
        """Test get_config_dir creates directory if it doesn't exist."""
        config_dir = paths.get_config_dir()

        assert config_dir == mock_storage_env / "config"
        assert config_dir.is_dir()

    def test_get_state_dir_creates_directory(self, mock_storage_env: Path) -> None:
        """Test get_state_dir creates directory if it doesn't exist."""
        state_dir = paths.get_state_dir()

        assert state_dir == mock_storage_env / "state"
        assert state_dir.is_dir()

    def test_get_log_dir_creates_directory(self, mock_storage_env: Path) -> None:
        """Test get_log_dir creates directory if it doesn't exist."""
        log_dir = paths.get_log_dir()

        assert log_dir == mock_storage_env / "logs"
        assert log_dir.is_dir()

    def test_get_preferences_dir_under_state(self, mock_storage_env: Path) -> None:
        """Test preferences live under the state directory."""
        assert paths.get_preferences_dir() == mock_storage_env / "state" / "preferences"

    def test_state_dir_override(
        self, mock_storage_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test AFWK_STATE_DIR overrides the state location."""
        override = tmp_path / "elsewhere"
        monkeypatch.setenv("AFWK_STATE_DIR", str(override))

        assert paths.get_state_dir() == override.resolve()
        assert paths.get_preferences_dir() == override.resolve() / "preferences"

    def test_paths_are_absolute(self, mock_storage_env: Path) -> None:
        """Test all path functions return absolute paths."""
        assert paths.get_home_dir().is_absolute()
        assert paths.get_config_dir().is_absolute()
        assert paths.get_state_dir().is_absolute()
        assert paths.get_log_dir().is_absolute()

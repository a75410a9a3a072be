"""
Unit tests for workspace preference persistence.
"""

import json
from pathlib import Path

import pytest

from afwk_library.storage.preferences import JsonPreferenceStore
from afwk_library.storage.preferences import workspace_id

KEY = "afwk.preference"


@pytest.mark.unit
class TestWorkspaceId:
    """Test workspace identifiers."""

    def test_stable(self, workspace: Path) -> None:
        """Test the same workspace always maps to the same id."""
        assert workspace_id(workspace) == workspace_id(workspace / ".." / workspace.name)

    def test_sanitized(self, tmp_path: Path) -> None:
        """Test unsafe characters are replaced in the readable part."""
        identifier = workspace_id(tmp_path / "my project!")

        assert identifier.startswith("my_project_-")
        assert len(identifier.rsplit("-", 1)[1]) == 16


@pytest.mark.unit
class TestJsonPreferenceStore:
    """Test JSON preference store."""

    def test_default_when_unset(self, workspace: Path, tmp_path: Path) -> None:
        """Test an unset key returns the default."""
        store = JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs")

        assert store.get(KEY, "pending") == "pending"

    def test_set_and_get(self, workspace: Path, tmp_path: Path) -> None:
        """Test values persist across store instances."""
        JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs").set(KEY, "full")

        assert JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs").get(KEY, "pending") == "full"

    def test_workspaces_isolated(self, tmp_path: Path) -> None:
        """Test one workspace's preference does not leak into another."""
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.mkdir()
        second.mkdir()

        JsonPreferenceStore(first, preferences_dir=tmp_path / "prefs").set(KEY, "none")

        assert JsonPreferenceStore(second, preferences_dir=tmp_path / "prefs").get(KEY, "pending") == "pending"

    def test_delete(self, workspace: Path, tmp_path: Path) -> None:
        """Test deleting a key restores the default."""
        store = JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs")
        store.set(KEY, "none")

        assert store.delete(KEY) is True
        assert store.delete(KEY) is False
        assert store.get(KEY, "pending") == "pending"

    def test_file_layout(self, workspace: Path, tmp_path: Path) -> None:
        """Test the file records the workspace and values."""
        store = JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs")
        store.set(KEY, "full")

        data = json.loads(store.path.read_text())
        assert data == {"workspace": str(workspace), "values": {KEY: "full"}}
        assert not store.path.with_suffix(".tmp").exists()

    def test_corrupt_file_reads_default(self, workspace: Path, tmp_path: Path) -> None:
        """Test an unreadable file is treated as empty."""
        store = JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs")
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")

        assert store.get(KEY, "pending") == "pending"

    def test_non_string_value_reads_default(self, workspace: Path, tmp_path: Path) -> None:
        """Test non-string values are ignored."""
        store = JsonPreferenceStore(workspace, preferences_dir=tmp_path / "prefs")
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"values": {KEY: 42}}))

        assert store.get(KEY, "pending") == "pending"

    def test_default_location(self, workspace: Path, mock_storage_env: Path) -> None:
        """Test the default directory is under AFWK_HOME state."""
        store = JsonPreferenceStore(workspace)

        assert store.preferences_dir == mock_storage_env / "state" / "preferences"

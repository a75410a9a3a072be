"""Workspace-scoped preference persistence.

Stores named preferences for one workspace in a JSON file under the state
directory, so decisions survive across sessions without writing into the
workspace itself.

Storage structure:
    state/preferences/
        {workspace-name}-{digest}.json    # {"workspace": ..., "values": {...}}
"""

import hashlib
import json
import logging
from pathlib import Path
from typing import Protocol

from .paths import get_preferences_dir

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    """Named preference storage scoped to one workspace."""

    def get(self, key: str, default: str) -> str: ...

    def set(self, key: str, value: str) -> None: ...


def workspace_id(workspace_root: Path) -> str:
    """Derive a stable, filesystem-safe identifier for a workspace.

    Args:
        workspace_root: Workspace directory

    Returns:
        Identifier of the form "{name}-{digest}"
    """
    resolved = Path(workspace_root).resolve()
    digest = hashlib.sha256(str(resolved).encode("utf-8")).hexdigest()[:16]
    name = "".join(c if c.isalnum() or c in "-_" else "_" for c in resolved.name) or "root"
    return f"{name}-{digest}"


class JsonPreferenceStore:
    """PreferenceStore persisted as one JSON file per workspace."""

    def __init__(self, workspace_root: Path, preferences_dir: Path | None = None) -> None:
        """Initialize store for a workspace.

        Args:
            workspace_root: Workspace the preferences belong to
            preferences_dir: Directory holding preference files.
                             Defaults to $AFWK_HOME/state/preferences
        """
        self.workspace_root = Path(workspace_root).resolve()
        self.preferences_dir = Path(preferences_dir) if preferences_dir else get_preferences_dir()
        self.path = self.preferences_dir / f"{workspace_id(self.workspace_root)}.json"

    def get(self, key: str, default: str) -> str:
        value = self._load_values().get(key, default)
        if not isinstance(value, str):
            logger.warning(f"Ignoring non-string preference {key}={value!r} in {self.path}")
            return default
        return value

    def set(self, key: str, value: str) -> None:
        values = self._load_values()
        values[key] = value
        self._save({"workspace": str(self.workspace_root), "values": values})
        logger.debug(f"Saved preference {key}={value} for {self.workspace_root}")

    def delete(self, key: str) -> bool:
        """Remove a preference.

        Returns:
            True if the key was present
        """
        values = self._load_values()
        if key not in values:
            return False
        del values[key]
        self._save({"workspace": str(self.workspace_root), "values": values})
        return True

    def _load_values(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            logger.warning(f"Failed to load preferences from {self.path}: {e}")
            return {}
        values = data.get("values") if isinstance(data, dict) else None
        return dict(values) if isinstance(values, dict) else {}

    def _save(self, data: dict) -> None:
        """Save dict as JSON file atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        temp_path = self.path.with_suffix(".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self.path)
        except Exception as e:
            if temp_path.exists():
                temp_path.unlink()
            raise RuntimeError(f"Failed to save preferences to {self.path}: {e}") from e

"""Shared dependency factories for FastAPI endpoints.

These factories provide dependency injection for settings, schema sources
and per-workspace resources.
"""

import asyncio
import logging
import weakref
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends
from fastapi import HTTPException

from afwk_library.config.loader import load_config
from afwk_library.config.settings import AfwkSettings
from afwk_library.errors import SchemaSourceError
from afwk_library.models.schema import Schema
from afwk_library.schema.source import SchemaSource
from afwk_library.schema.source import get_schema_source
from afwk_library.storage.preferences import JsonPreferenceStore

logger = logging.getLogger(__name__)

# Entries go away once no request or controller holds the lock
_workspace_locks: weakref.WeakValueDictionary[Path, asyncio.Lock] = weakref.WeakValueDictionary()


@lru_cache(maxsize=1)
def get_settings() -> AfwkSettings:
    """Get daemon settings, loaded once per process.

    Returns:
        AfwkSettings from defaults, afwk.yaml and environment
    """
    return load_config()


def get_schema_source_dependency(
    settings: Annotated[AfwkSettings, Depends(get_settings)],
) -> SchemaSource:
    """Get the configured schema source.

    Returns:
        SchemaSource for the configured schema document or the built-in schema
    """
    return get_schema_source(settings)


def resolve_workspace(workspace_path: str | None, settings: AfwkSettings) -> Path:
    """Resolve a requested workspace to an existing directory.

    Args:
        workspace_path: Requested path; None selects the configured workspace
        settings: Daemon settings

    Returns:
        Absolute workspace path

    Raises:
        ValueError: If the path is not an existing directory
    """
    base = Path(settings.workspace_path)
    if not workspace_path:
        path = base
    else:
        path = Path(workspace_path).expanduser()
        if not path.is_absolute():
            path = base / path

    resolved = path.resolve()
    if not resolved.is_dir():
        raise ValueError(f"Workspace is not a directory: {resolved}")
    return resolved


def require_workspace(workspace_path: str | None, settings: AfwkSettings) -> Path:
    """Resolve a workspace, mapping failures to HTTP 400."""
    try:
        return resolve_workspace(workspace_path, settings)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


async def require_schema(schema_source: SchemaSource) -> Schema:
    """Fetch the schema, mapping failures to HTTP 500 with the cause."""
    try:
        return await schema_source.fetch_schema()
    except SchemaSourceError as exc:
        logger.error(f"Failed to load schema: {exc}")
        raise HTTPException(status_code=500, detail=f"Failed to load AFWK schema: {exc}") from exc


def get_preference_store(workspace: Path) -> JsonPreferenceStore:
    """Get the preference store of a workspace."""
    return JsonPreferenceStore(workspace)


def get_workspace_lock(workspace: Path) -> asyncio.Lock:
    """Get the lock serializing structure changes of one workspace.

    Every request builds its own controller; sharing the lock keeps cycles
    and scaffolding of the same workspace from interleaving.
    """
    lock = _workspace_locks.get(workspace)
    if lock is None:
        lock = asyncio.Lock()
        _workspace_locks[workspace] = lock
    return lock

"""Scaffolding of missing directories and files.

Contract:
- Inputs: Workspace root, schema, optionally the missing list of a prior validation
- Outputs: Created paths in creation order (ancestors before descendants)
- Side Effects: Creates directories and placeholder files; never overwrites a file
- Errors: CreateError on any write failure; earlier creations are kept.
  StructurePathError before any write when a path lies outside the root

Both entry points are idempotent: running them again only creates what is
still missing and leaves existing content untouched.
"""

import asyncio
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from afwk_library.errors import CreateError
from afwk_library.errors import StructurePathError
from afwk_library.models.schema import Schema
from afwk_library.models.structure import CreatedPaths
from afwk_library.models.structure import ExpectedPath
from afwk_library.storage.filesystem import FileSystem
from afwk_library.storage.filesystem import LocalFileSystem
from afwk_library.storage.filesystem import probe

from .collector import build_expected_index
from .collector import collect_expected_entries
from .collector import get_structure_root

logger = logging.getLogger(__name__)

DEFAULT_FILE_DESCRIPTION = "Project file"

PLACEHOLDER_GREETING = "# Hello world!\n\nThis file was created automatically by afwk.\n"


def render_placeholder(file_name: str, description: str) -> str:
    """Build the seed content for a newly created file."""
    return f"# {file_name}\n\n{description}\n\n---\n\n{PLACEHOLDER_GREETING}"


async def _ensure_directory(fs: FileSystem, path: str) -> None:
    try:
        await asyncio.to_thread(fs.create_directory, path)
    except Exception as e:
        raise CreateError(path, e) from e


async def _ensure_file(fs: FileSystem, path: str, description: str) -> bool:
    """Write a placeholder file unless one is already there.

    Returns:
        True if the file was written, False if it already existed
    """
    if await probe(fs, path):
        return False

    content = render_placeholder(Path(path).name, description).encode("utf-8")
    try:
        await asyncio.to_thread(fs.write_file, path, content)
    except FileExistsError:
        logger.debug(f"File appeared before it could be written, keeping it: {path}")
        return False
    except Exception as e:
        raise CreateError(path, e) from e
    return True


async def create_full_structure(
    workspace_root: str | Path,
    schema: Schema,
    fs: FileSystem | None = None,
) -> CreatedPaths:
    """Create the complete structure declared by the schema.

    Walks the same pre-order as the collector, so every directory exists
    before its files and subdirectories are created.

    Args:
        workspace_root: Workspace directory to scaffold into
        schema: Structure to create
        fs: Filesystem to write to (default: local disk)

    Returns:
        The root followed by the collector enumeration

    Raises:
        CreateError: If a directory or file cannot be created
    """
    fs = fs or LocalFileSystem()
    root_path = get_structure_root(workspace_root, schema)
    root = str(root_path)

    await _ensure_directory(fs, root)
    created: CreatedPaths = [root]
    written = 0

    for entry in collect_expected_entries(schema.tree, root_path):
        if entry.is_file:
            if await _ensure_file(fs, entry.path, entry.description):
                written += 1
        else:
            await _ensure_directory(fs, entry.path)
        created.append(entry.path)

    logger.info(f"Created structure at {root}: {len(created)} paths ensured, {written} files written")
    return created


def _undeclared_entry(path: str) -> ExpectedPath:
    # Only reached for in-root paths the schema does not declare: fall back to the name shape
    kind = "file" if Path(path).suffix else "directory"
    logger.warning(f"Path not declared by schema, treating as {kind}: {path}")
    return ExpectedPath(path=path, kind=kind, description=DEFAULT_FILE_DESCRIPTION)


def _anchor_in_root(workspace_root: Path, root_path: Path, path: str) -> str:
    """Normalize a requested path and check it lies within the structure root.

    Relative paths are taken relative to the workspace, not the process.

    Raises:
        StructurePathError: If the path is neither the root nor below it
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = workspace_root / candidate
    candidate = Path(os.path.normpath(candidate))

    if candidate != root_path and root_path not in candidate.parents:
        raise StructurePathError(path, str(root_path))
    return str(candidate)


async def complete_missing_structure(
    workspace_root: str | Path,
    schema: Schema,
    missing_paths: Iterable[str],
    fs: FileSystem | None = None,
) -> CreatedPaths:
    """Create only the given missing paths.

    Paths are processed shortest first: a parent's path is a strict prefix of
    its children's, so every ancestor is handled before its descendants.
    The kind and description of each path come from the schema; a file's
    parent directory is ensured before the file is written. Every path is
    checked against the structure root before anything is created.

    Args:
        workspace_root: Workspace directory to scaffold into
        schema: Structure the paths were validated against
        missing_paths: The missing list of a prior ValidationResult; relative
            entries are resolved against workspace_root
        fs: Filesystem to write to (default: local disk)

    Returns:
        Processed paths in creation order

    Raises:
        StructurePathError: If a path lies outside the structure root
        CreateError: If a directory or file cannot be created
    """
    fs = fs or LocalFileSystem()
    workspace = Path(os.path.normpath(workspace_root))
    root_path = get_structure_root(workspace, schema)
    index = build_expected_index(schema, root_path)

    unique_paths = dict.fromkeys(_anchor_in_root(workspace, root_path, path) for path in missing_paths)
    ordered = sorted(unique_paths, key=len)

    created: CreatedPaths = []
    for path in ordered:
        entry = index.get(path) or _undeclared_entry(path)

        if entry.is_file:
            await _ensure_directory(fs, str(Path(path).parent))
            await _ensure_file(fs, path, entry.description or DEFAULT_FILE_DESCRIPTION)
        else:
            await _ensure_directory(fs, path)

        created.append(path)

    logger.info(f"Completed structure at {root_path}: {len(created)} missing paths created")
    return created


async def remove_structure(
    workspace_root: str | Path,
    schema: Schema,
    fs: FileSystem | None = None,
) -> bool:
    """Delete the whole structure root. Maintenance only; destroys user content.

    Returns:
        True if a structure was removed, False if there was none
    """
    fs = fs or LocalFileSystem()
    root = str(get_structure_root(workspace_root, schema))

    if not await probe(fs, root):
        return False

    await asyncio.to_thread(fs.delete_recursive, root)
    logger.warning(f"Removed structure at {root}")
    return True

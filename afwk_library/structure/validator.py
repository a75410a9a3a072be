"""Project structure validation against a schema.

Contract:
- Inputs: Workspace root, schema, filesystem
- Outputs: ValidationResult (fresh per call, never mutated)
- Side Effects: None (read-only)
- Errors: Never raises for filesystem problems; an unreadable path is missing
"""

import asyncio
import logging
from pathlib import Path

from afwk_library.models.schema import Schema
from afwk_library.models.structure import ValidationResult
from afwk_library.storage.filesystem import FileSystem
from afwk_library.storage.filesystem import LocalFileSystem
from afwk_library.storage.filesystem import probe

from .collector import collect_expected_paths
from .collector import get_structure_root

logger = logging.getLogger(__name__)

DEFAULT_PROBE_CONCURRENCY = 32


async def validate_project_structure(
    workspace_root: str | Path,
    schema: Schema,
    fs: FileSystem | None = None,
    concurrency: int = DEFAULT_PROBE_CONCURRENCY,
) -> ValidationResult:
    """Compare a workspace against the schema.

    Two probing speeds:
    - Root absent: every expected path is reported missing without probing
      any descendant, since none of them can exist.
    - Root present: every expected path is probed individually; probes run
      concurrently (bounded by ``concurrency``) and results keep schema order.

    Args:
        workspace_root: Workspace directory containing the structure root
        schema: Expected structure
        fs: Filesystem to probe (default: local disk)
        concurrency: Maximum probes in flight

    Returns:
        ValidationResult with missing/existing partitions in collector order
    """
    fs = fs or LocalFileSystem()
    root_path = get_structure_root(workspace_root, schema)
    root = str(root_path)
    expected = collect_expected_paths(schema.tree, root_path)

    if not await probe(fs, root):
        missing = [root, *expected]
        logger.info(f"No structure root at {root} ({len(missing)} expected paths missing)")
        return ValidationResult(
            valid=False,
            root_exists=False,
            missing=missing,
            existing=[],
            total_expected=len(missing),
        )

    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def bounded_probe(path: str) -> bool:
        async with semaphore:
            return await probe(fs, path)

    found = await asyncio.gather(*(bounded_probe(path) for path in expected))

    existing = [root]
    missing: list[str] = []
    for path, present in zip(expected, found, strict=True):
        if present:
            existing.append(path)
        else:
            missing.append(path)

    result = ValidationResult(
        valid=not missing,
        root_exists=True,
        missing=missing,
        existing=existing,
        total_expected=len(expected) + 1,
    )
    logger.info(f"Validated {root}: {get_validation_summary(result)}")
    return result


def get_validation_summary(result: ValidationResult) -> str:
    """Get a human-readable summary of a validation result.

    Returns:
        "complete (N verified)", "no structure detected" or
        "incomplete: existing/total (P%)" phrasing
    """
    if result.valid:
        return f"AFWK structure complete ({result.total_expected} items verified)"

    if not result.root_exists:
        return "No AFWK structure detected in this project"

    percentage = int(result.existing_count * 100 / result.total_expected + 0.5) if result.total_expected else 0
    return f"AFWK structure incomplete: {result.existing_count}/{result.total_expected} ({percentage}%)"


def format_missing_paths(
    workspace_root: str | Path,
    missing_paths: list[str],
    max_display: int = 5,
) -> list[str]:
    """Format missing paths for display, relative to the workspace.

    Args:
        workspace_root: Workspace the paths are shown relative to
        missing_paths: Absolute missing paths
        max_display: Paths listed before truncating

    Returns:
        POSIX-style relative paths, with a trailing "...and N more" line
        when truncated
    """
    workspace = Path(workspace_root)
    relative_paths = []
    for missing_path in missing_paths:
        path = Path(missing_path)
        try:
            relative_paths.append(path.relative_to(workspace).as_posix())
        except ValueError:
            relative_paths.append(path.as_posix())

    if len(relative_paths) <= max_display:
        return relative_paths

    remaining = len(relative_paths) - max_display
    return [*relative_paths[:max_display], f"...and {remaining} more"]

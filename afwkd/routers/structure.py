"""Structure API endpoints.

Validate, scaffold and remove the AFWK structure of a workspace.
"""

import logging
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query

from afwk_library.config.settings import AfwkSettings
from afwk_library.errors import CreateError
from afwk_library.errors import StructurePathError
from afwk_library.schema.source import SchemaSource
from afwk_library.structure.scaffolder import complete_missing_structure
from afwk_library.structure.scaffolder import create_full_structure
from afwk_library.structure.scaffolder import remove_structure
from afwk_library.structure.validator import get_validation_summary
from afwk_library.structure.validator import validate_project_structure

from ..dependencies import get_schema_source_dependency
from ..dependencies import get_settings
from ..dependencies import get_workspace_lock
from ..dependencies import require_schema
from ..dependencies import require_workspace
from ..models import CompleteStructureRequest
from ..models import RemoveResponse
from ..models import ScaffoldResponse
from ..models import ValidationResponse
from ..models import WorkspaceRequest
from ..services.notifications import EventNotifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/structure", tags=["structure"])


@router.post("/validate", response_model=ValidationResponse)
async def validate_structure(
    request: WorkspaceRequest,
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    schema_source: Annotated[SchemaSource, Depends(get_schema_source_dependency)],
) -> ValidationResponse:
    """Validate the workspace against the schema.

    Read-only: nothing is created and no preference is changed.

    Args:
        request: Workspace to validate
        settings: Daemon settings
        schema_source: Schema source

    Returns:
        Validation result with its summary text

    Raises:
        HTTPException:
            - 400 if the workspace is not a directory
            - 500 if the schema cannot be loaded
    """
    workspace = require_workspace(request.workspace_path, settings)
    schema = await require_schema(schema_source)

    result = await validate_project_structure(workspace, schema, concurrency=settings.probe_concurrency)
    return ValidationResponse(
        workspace_path=str(workspace),
        result=result,
        summary=get_validation_summary(result),
    )


@router.post("/create", response_model=ScaffoldResponse)
async def create_structure(
    request: WorkspaceRequest,
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    schema_source: Annotated[SchemaSource, Depends(get_schema_source_dependency)],
) -> ScaffoldResponse:
    """Create the full structure. Existing files are never overwritten.

    Args:
        request: Workspace to scaffold
        settings: Daemon settings
        schema_source: Schema source

    Returns:
        Created paths and the validation afterwards

    Raises:
        HTTPException:
            - 400 if the workspace is not a directory
            - 500 if the schema cannot be loaded or a path cannot be created
    """
    workspace = require_workspace(request.workspace_path, settings)
    schema = await require_schema(schema_source)
    notifier = EventNotifier(str(workspace))

    async with get_workspace_lock(workspace):
        try:
            created = await create_full_structure(workspace, schema)
        except CreateError as exc:
            logger.error(f"Failed to create structure in {workspace}: {exc}")
            notifier.error(f"Failed to create AFWK structure: {exc}")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

        result = await validate_project_structure(workspace, schema, concurrency=settings.probe_concurrency)

    notifier.info(f"AFWK structure created ({len(created)} items)")
    return ScaffoldResponse(workspace_path=str(workspace), created=created, count=len(created), validation=result)


@router.post("/complete", response_model=ScaffoldResponse)
async def complete_structure(
    request: CompleteStructureRequest,
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    schema_source: Annotated[SchemaSource, Depends(get_schema_source_dependency)],
) -> ScaffoldResponse:
    """Create only the missing paths.

    When the request carries no missing list, the workspace is validated
    first and its missing list is used. Relative entries are taken relative
    to the workspace.

    Args:
        request: Workspace and optional missing list
        settings: Daemon settings
        schema_source: Schema source

    Returns:
        Created paths and the validation afterwards

    Raises:
        HTTPException:
            - 400 if the workspace is not a directory or a path lies
              outside the structure root
            - 500 if the schema cannot be loaded or a path cannot be created
    """
    workspace = require_workspace(request.workspace_path, settings)
    schema = await require_schema(schema_source)
    notifier = EventNotifier(str(workspace))

    async with get_workspace_lock(workspace):
        missing = request.missing
        if missing is None:
            before = await validate_project_structure(workspace, schema, concurrency=settings.probe_concurrency)
            missing = before.missing

        try:
            created = await complete_missing_structure(workspace, schema, missing)
        except StructurePathError as exc:
            logger.warning(f"Refused to complete structure in {workspace}: {exc}")
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CreateError as exc:
            logger.error(f"Failed to complete structure in {workspace}: {exc}")
            notifier.error(f"Failed to create AFWK structure: {exc}")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

        result = await validate_project_structure(workspace, schema, concurrency=settings.probe_concurrency)

    notifier.info(f"AFWK structure completed ({len(created)} items added)")
    return ScaffoldResponse(workspace_path=str(workspace), created=created, count=len(created), validation=result)


@router.delete("", response_model=RemoveResponse)
async def delete_structure(
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    schema_source: Annotated[SchemaSource, Depends(get_schema_source_dependency)],
    workspace_path: Annotated[str | None, Query(alias="workspacePath")] = None,
    confirm: bool = False,
) -> RemoveResponse:
    """Delete the structure root and everything below it.

    Maintenance only. Destroys user content, so the caller must pass
    confirm=true.

    Raises:
        HTTPException:
            - 400 if not confirmed or the workspace is not a directory
            - 500 if the schema cannot be loaded or deletion fails
    """
    if not confirm:
        raise HTTPException(status_code=400, detail="Removing the structure requires confirm=true")

    workspace = require_workspace(workspace_path, settings)
    schema = await require_schema(schema_source)

    async with get_workspace_lock(workspace):
        try:
            removed = await remove_structure(workspace, schema)
        except OSError as exc:
            logger.error(f"Failed to remove structure in {workspace}: {exc}")
            raise HTTPException(status_code=500, detail="Internal server error") from exc

    return RemoveResponse(workspace_path=str(workspace), removed=removed)

"""Preference API endpoints.

Reads and writes the persisted per-workspace AFWK preference.
"""

import logging
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query

from afwk_library.config.settings import AfwkSettings
from afwk_library.models.reconciliation import DEFAULT_PREFERENCE
from afwk_library.models.reconciliation import PREFERENCE_VALUES

from ..dependencies import get_preference_store
from ..dependencies import get_settings
from ..dependencies import require_workspace
from ..models import PreferenceResponse
from ..models import PreferenceUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


@router.get("", response_model=PreferenceResponse)
async def get_preference(
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    workspace_path: Annotated[str | None, Query(alias="workspacePath")] = None,
) -> PreferenceResponse:
    """Get the workspace preference.

    Unknown stored values read as pending.
    """
    workspace = require_workspace(workspace_path, settings)
    value = get_preference_store(workspace).get(settings.preference_key, DEFAULT_PREFERENCE)
    if value not in PREFERENCE_VALUES:
        value = DEFAULT_PREFERENCE

    return PreferenceResponse(workspace_path=str(workspace), key=settings.preference_key, preference=value)


@router.put("", response_model=PreferenceResponse)
async def set_preference(
    request: PreferenceUpdateRequest,
    settings: Annotated[AfwkSettings, Depends(get_settings)],
) -> PreferenceResponse:
    """Persist the workspace preference.

    Raises:
        HTTPException:
            - 400 if the workspace is not a directory
            - 422 if the preference is not full, none or pending
            - 500 if the preference cannot be written
    """
    workspace = require_workspace(request.workspace_path, settings)
    try:
        get_preference_store(workspace).set(settings.preference_key, request.preference)
    except RuntimeError as exc:
        logger.error(f"Failed to save preference for {workspace}: {exc}")
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    logger.info(f"AFWK preference for {workspace} set to {request.preference}")
    return PreferenceResponse(workspace_path=str(workspace), key=settings.preference_key, preference=request.preference)


@router.delete("", response_model=PreferenceResponse)
async def reset_preference(
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    workspace_path: Annotated[str | None, Query(alias="workspacePath")] = None,
) -> PreferenceResponse:
    """Forget the workspace preference so the next check prompts again."""
    workspace = require_workspace(workspace_path, settings)
    try:
        get_preference_store(workspace).delete(settings.preference_key)
    except RuntimeError as exc:
        logger.error(f"Failed to reset preference for {workspace}: {exc}")
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    return PreferenceResponse(workspace_path=str(workspace), key=settings.preference_key, preference=DEFAULT_PREFERENCE)

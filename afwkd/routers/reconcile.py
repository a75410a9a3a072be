"""Reconciliation API endpoint.

Runs one reconciliation cycle for automation callers. There is nobody to
click a dialog, so the caller answers any prompt up front with a button id.
"""

import logging
from functools import partial
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends

from afwk_library.config.settings import AfwkSettings
from afwk_library.reconciliation.collaborators import PresetChoicePresenter
from afwk_library.reconciliation.controller import ReconciliationController
from afwk_library.schema.source import SchemaSource

from ..dependencies import get_preference_store
from ..dependencies import get_schema_source_dependency
from ..dependencies import get_settings
from ..dependencies import get_workspace_lock
from ..dependencies import require_workspace
from ..models import ReconcileRequest
from ..models import ReconcileResponse
from ..services.notifications import EventNotifier
from ..services.notifications import publish_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reconcile", tags=["reconcile"])


@router.post("", response_model=ReconcileResponse)
async def reconcile(
    request: ReconcileRequest,
    settings: Annotated[AfwkSettings, Depends(get_settings)],
    schema_source: Annotated[SchemaSource, Depends(get_schema_source_dependency)],
) -> ReconcileResponse:
    """Run one reconciliation cycle.

    Errors inside the cycle do not fail the request: they end in the error
    state and are reported through the returned notifications.

    Args:
        request: Workspace, trigger and preset prompt answer
        settings: Daemon settings
        schema_source: Schema source

    Returns:
        Final status, the prompt that was shown (if any) and notifications

    Raises:
        HTTPException: 400 if the workspace is not a directory
    """
    workspace = require_workspace(request.workspace_path, settings)
    presenter = PresetChoicePresenter(request.choice)
    notifier = EventNotifier(str(workspace))

    controller = ReconciliationController(
        workspace,
        schema_source,
        presenter,
        notifier,
        preference_store_factory=get_preference_store,
        settings=settings,
        lock=get_workspace_lock(workspace),
    )
    controller.add_status_listener(partial(publish_status, workspace_path=str(workspace)))

    state = await controller.reconcile(request.trigger)
    logger.info(f"Reconciled {workspace} ({request.trigger.value}): {state.value}")

    return ReconcileResponse(
        status=controller.status,
        prompt=presenter.last_prompt,
        notifications=notifier.notifications,
    )

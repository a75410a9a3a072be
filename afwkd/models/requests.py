"""Request models for afwkd API."""

from pydantic import Field

from afwk_library.models.base import CamelCaseModel
from afwk_library.models.reconciliation import Preference
from afwk_library.models.reconciliation import Trigger


class WorkspaceRequest(CamelCaseModel):
    """Request naming the workspace to operate on."""

    workspace_path: str | None = Field(
        default=None, description="Workspace directory; relative paths resolve against the configured workspace"
    )


class CompleteStructureRequest(WorkspaceRequest):
    """Request to create missing paths."""

    missing: list[str] | None = Field(
        default=None, description="Missing paths from a prior validation; validated afresh when omitted"
    )


class PreferenceUpdateRequest(WorkspaceRequest):
    """Request to persist the workspace preference."""

    preference: Preference = Field(description="New preference")


class ReconcileRequest(WorkspaceRequest):
    """Request to run one reconciliation cycle non-interactively."""

    trigger: Trigger = Field(default=Trigger.MANUAL_CHECK, description="Trigger the cycle simulates")
    choice: str | None = Field(
        default=None, description="Button id to answer a prompt with; omitted means the prompt is dismissed"
    )

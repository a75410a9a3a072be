"""Response models for afwkd API."""

from pydantic import Field

from afwk_library.models.base import CamelCaseModel
from afwk_library.models.reconciliation import ChoicePrompt
from afwk_library.models.reconciliation import Notification
from afwk_library.models.reconciliation import Preference
from afwk_library.models.reconciliation import StatusSummary
from afwk_library.models.structure import ValidationResult


class StatusResponse(CamelCaseModel):
    """Daemon status."""

    status: str = Field(description="Daemon status")
    version: str = Field(description="Daemon version")
    uptime_seconds: float = Field(description="Seconds since start")
    workspace_path: str = Field(description="Default workspace")
    schema_path: str | None = Field(default=None, description="Configured schema document, None for built-in")


class ValidationResponse(CamelCaseModel):
    """Validation result with its summary."""

    workspace_path: str
    result: ValidationResult
    summary: str


class ScaffoldResponse(CamelCaseModel):
    """Outcome of a scaffold operation."""

    workspace_path: str
    created: list[str] = Field(description="Paths processed, in creation order")
    count: int = Field(description="Number of paths processed")
    validation: ValidationResult = Field(description="Validation after scaffolding")


class RemoveResponse(CamelCaseModel):
    """Outcome of structure removal."""

    workspace_path: str
    removed: bool


class PreferenceResponse(CamelCaseModel):
    """Persisted workspace preference."""

    workspace_path: str
    key: str
    preference: Preference


class ReconcileResponse(CamelCaseModel):
    """Outcome of one reconciliation cycle."""

    status: StatusSummary
    prompt: ChoicePrompt | None = Field(default=None, description="Prompt that was presented, if any")
    notifications: list[Notification] = Field(default_factory=list)

"""Reconciliation lifecycle models.

State transitions:
- UNINITIALIZED -> CHECKING: any trigger while the preference is not "none"
- UNINITIALIZED -> DISABLED: any trigger while the preference is "none"
- CHECKING -> COMPLETE: structure is valid
- CHECKING -> INCOMPLETE: structure is missing paths
- INCOMPLETE -> COMPLETE: user chose to create/complete and scaffolding succeeded
- INCOMPLETE -> DISABLED: user chose to continue without the structure
- any -> ERROR: schema, validation or scaffolding failed
"""

from enum import Enum
from typing import Literal

from pydantic import Field

from afwk_library.models.base import CamelCaseModel
from afwk_library.models.structure import ValidationResult

Preference = Literal["full", "none", "pending"]

PREFERENCE_VALUES: tuple[str, ...] = ("full", "none", "pending")
DEFAULT_PREFERENCE: Preference = "pending"


class ReconciliationState(str, Enum):
    """Where a workspace stands in the reconciliation lifecycle."""

    UNINITIALIZED = "uninitialized"
    CHECKING = "checking"
    DISABLED = "disabled"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    ERROR = "error"


class Trigger(str, Enum):
    """Events that start a reconciliation cycle."""

    WORKSPACE_OPENED = "workspace_opened"
    MANUAL_CHECK = "manual_check"
    FOLDERS_CHANGED = "folders_changed"


class ChoiceAction(str, Enum):
    """What the user decided when prompted."""

    CREATE = "create"
    COMPLETE = "complete"
    SKIP = "skip"
    CANCELLED = "cancelled"


class ChoiceButton(CamelCaseModel):
    """A labeled button offered to the user."""

    id: str = Field(description="Identifier returned when the button is chosen")
    label: str = Field(description="Button text")
    variant: Literal["primary", "secondary"] = Field(default="secondary", description="Visual emphasis")


class ChoicePrompt(CamelCaseModel):
    """Everything a host needs to render a choice for the user."""

    id: str = Field(description="Prompt identifier")
    title: str = Field(description="Window or dialog title")
    subtitle: str | None = Field(default=None, description="Secondary title line")
    heading: str = Field(description="Prompt heading")
    body: str = Field(description="Explanatory text")
    details: list[str] = Field(default_factory=list, description="Bulleted detail lines")
    icon: Literal["info", "warning", "error"] = Field(default="info", description="Icon category")
    buttons: list[ChoiceButton] = Field(description="Buttons in display order")

    def button_ids(self) -> list[str]:
        return [button.id for button in self.buttons]


class StatusSummary(CamelCaseModel):
    """Host-renderable summary of the current reconciliation status."""

    state: ReconciliationState = Field(description="Current lifecycle state")
    preference: Preference = Field(description="Persisted workspace preference")
    text: str = Field(description="Short status label")
    tooltip: str = Field(description="Longer status description")
    validation: ValidationResult | None = Field(default=None, description="Latest validation result, if any")


class Notification(CamelCaseModel):
    """A fire-and-forget message for the user."""

    level: Literal["info", "error"] = Field(description="Severity")
    message: str = Field(description="Message text")

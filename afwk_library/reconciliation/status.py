"""Status summaries for hosts to render."""

from afwk_library.models.reconciliation import Preference
from afwk_library.models.reconciliation import ReconciliationState
from afwk_library.models.reconciliation import StatusSummary
from afwk_library.models.structure import ValidationResult
from afwk_library.structure.validator import get_validation_summary

CHECK_HINT = "\n\nRun a manual check to configure AFWK"


def build_status_summary(
    state: ReconciliationState,
    preference: Preference,
    validation: ValidationResult | None = None,
    error: str | None = None,
) -> StatusSummary:
    """Describe the current state as a short label and a tooltip."""
    if state == ReconciliationState.UNINITIALIZED:
        text, tooltip = "AFWK: Idle", "No workspace checked yet"
    elif state == ReconciliationState.DISABLED:
        text, tooltip = "AFWK: Disabled", "AFWK integration disabled for this project" + CHECK_HINT
    elif state == ReconciliationState.CHECKING:
        text, tooltip = "AFWK: Checking...", "Checking AFWK structure"
    elif state == ReconciliationState.ERROR:
        text, tooltip = "AFWK: Error", f"Error: {error or 'unknown error'}" + CHECK_HINT
    elif validation is not None and validation.valid:
        text, tooltip = "AFWK: Active", get_validation_summary(validation) + CHECK_HINT
    elif validation is not None and validation.root_exists:
        text, tooltip = "AFWK: Incomplete", get_validation_summary(validation) + CHECK_HINT
    else:
        text, tooltip = "AFWK: Not detected", "No AFWK structure found" + CHECK_HINT

    return StatusSummary(
        state=state,
        preference=preference,
        text=text,
        tooltip=tooltip,
        validation=validation,
    )

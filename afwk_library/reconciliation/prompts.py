"""Prompts offered when the structure is missing or incomplete."""

import logging
from pathlib import Path

from afwk_library.models.reconciliation import ChoiceAction
from afwk_library.models.reconciliation import ChoiceButton
from afwk_library.models.reconciliation import ChoicePrompt
from afwk_library.models.structure import ValidationResult
from afwk_library.structure.validator import format_missing_paths

logger = logging.getLogger(__name__)

BUTTON_CREATE_FULL = "create-full"
BUTTON_COMPLETE_MISSING = "complete-missing"
BUTTON_USE_WITHOUT = "use-without"

_BUTTON_ACTIONS = {
    BUTTON_CREATE_FULL: ChoiceAction.CREATE,
    BUTTON_COMPLETE_MISSING: ChoiceAction.COMPLETE,
    BUTTON_USE_WITHOUT: ChoiceAction.SKIP,
}


def build_no_structure_prompt(root_name: str = ".afwk") -> ChoicePrompt:
    """Prompt shown when the structure root does not exist."""
    return ChoicePrompt(
        id="afwk-no-structure",
        title="AFWK setup",
        subtitle="Initial setup",
        heading="AFWK structure not detected",
        body=(
            "This project does not have the AFWK structure. "
            "The structure keeps project guidance documents and the task board "
            "in a predictable place."
        ),
        details=[
            f"{root_name} folder with the project configuration",
            "Standard document templates",
            "Task board folders",
        ],
        icon="info",
        buttons=[
            ChoiceButton(id=BUTTON_CREATE_FULL, label="Create structure", variant="primary"),
            ChoiceButton(id=BUTTON_USE_WITHOUT, label="Continue without AFWK", variant="secondary"),
        ],
    )


def build_incomplete_prompt(
    workspace_root: str | Path,
    result: ValidationResult,
    max_display: int = 5,
) -> ChoicePrompt:
    """Prompt shown when the structure exists but paths are missing."""
    missing_count = result.missing_count
    return ChoicePrompt(
        id="afwk-incomplete-structure",
        title="AFWK structure incomplete",
        subtitle=f"{missing_count} missing item(s)",
        heading="AFWK structure incomplete",
        body=(
            "A partial AFWK structure was found in this project. "
            f"{missing_count} item(s) are needed to complete it."
        ),
        details=format_missing_paths(workspace_root, result.missing, max_display),
        icon="warning",
        buttons=[
            ChoiceButton(id=BUTTON_COMPLETE_MISSING, label="Complete structure", variant="primary"),
            ChoiceButton(id=BUTTON_USE_WITHOUT, label="Continue without completing", variant="secondary"),
        ],
    )


def build_prompt(
    workspace_root: str | Path,
    result: ValidationResult,
    root_name: str = ".afwk",
    max_display: int = 5,
) -> ChoicePrompt:
    """Pick the prompt matching a failed validation."""
    if not result.root_exists:
        return build_no_structure_prompt(root_name)
    return build_incomplete_prompt(workspace_root, result, max_display)


def interpret_choice(prompt: ChoicePrompt, response: object) -> ChoiceAction:
    """Map a presenter response to an action.

    Anything that is not one of the prompt's own button ids, including a
    dismissal, counts as cancelled.
    """
    if response is None:
        return ChoiceAction.CANCELLED
    if not isinstance(response, str) or response not in prompt.button_ids():
        logger.warning(f"Unexpected response to prompt {prompt.id}: {response!r}")
        return ChoiceAction.CANCELLED
    return _BUTTON_ACTIONS.get(response, ChoiceAction.CANCELLED)

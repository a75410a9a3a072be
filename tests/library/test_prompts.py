"""
Unit tests for reconciliation prompts and status summaries.
"""

from pathlib import Path

import pytest

from afwk_library.models.reconciliation import ChoiceAction
from afwk_library.models.reconciliation import ReconciliationState
from afwk_library.models.structure import ValidationResult
from afwk_library.reconciliation.prompts import BUTTON_COMPLETE_MISSING
from afwk_library.reconciliation.prompts import BUTTON_CREATE_FULL
from afwk_library.reconciliation.prompts import BUTTON_USE_WITHOUT
from afwk_library.reconciliation.prompts import build_incomplete_prompt
from afwk_library.reconciliation.prompts import build_no_structure_prompt
from afwk_library.reconciliation.prompts import build_prompt
from afwk_library.reconciliation.prompts import interpret_choice
from afwk_library.reconciliation.status import build_status_summary


def absent_result(workspace: Path) -> ValidationResult:
    root = str(workspace / ".afwk")
    return ValidationResult(valid=False, root_exists=False, missing=[root, f"{root}/a"], total_expected=2)


def partial_result(workspace: Path, missing_count: int) -> ValidationResult:
    root = workspace / ".afwk"
    return ValidationResult(
        valid=False,
        root_exists=True,
        existing=[str(root)],
        missing=[str(root / f"m{i}") for i in range(missing_count)],
        total_expected=missing_count + 1,
    )


@pytest.mark.unit
class TestPrompts:
    """Test prompt construction."""

    def test_no_structure_prompt_buttons(self) -> None:
        """Test the no-structure prompt offers create and continue-without."""
        prompt = build_no_structure_prompt(".afwk")

        assert prompt.id == "afwk-no-structure"
        assert prompt.icon == "info"
        assert prompt.button_ids() == [BUTTON_CREATE_FULL, BUTTON_USE_WITHOUT]
        assert prompt.buttons[0].variant == "primary"
        assert any(".afwk" in line for line in prompt.details)

    def test_incomplete_prompt_lists_missing(self, workspace: Path) -> None:
        """Test the incomplete prompt lists missing paths relative to the workspace."""
        prompt = build_incomplete_prompt(workspace, partial_result(workspace, 2))

        assert prompt.id == "afwk-incomplete-structure"
        assert prompt.icon == "warning"
        assert prompt.button_ids() == [BUTTON_COMPLETE_MISSING, BUTTON_USE_WITHOUT]
        assert prompt.details == [".afwk/m0", ".afwk/m1"]
        assert "2 missing" in prompt.subtitle

    def test_incomplete_prompt_truncates(self, workspace: Path) -> None:
        """Test long missing lists are truncated."""
        prompt = build_incomplete_prompt(workspace, partial_result(workspace, 8), max_display=5)

        assert prompt.details[-1] == "...and 3 more"
        assert len(prompt.details) == 6

    def test_build_prompt_picks_by_root(self, workspace: Path) -> None:
        """Test the prompt kind follows whether the root exists."""
        assert build_prompt(workspace, absent_result(workspace)).id == "afwk-no-structure"
        assert build_prompt(workspace, partial_result(workspace, 1)).id == "afwk-incomplete-structure"


@pytest.mark.unit
class TestInterpretChoice:
    """Test mapping responses to actions."""

    def test_known_buttons(self, workspace: Path) -> None:
        """Test each button maps to its action."""
        no_structure = build_no_structure_prompt()
        incomplete = build_incomplete_prompt(workspace, partial_result(workspace, 1))

        assert interpret_choice(no_structure, BUTTON_CREATE_FULL) == ChoiceAction.CREATE
        assert interpret_choice(incomplete, BUTTON_COMPLETE_MISSING) == ChoiceAction.COMPLETE
        assert interpret_choice(incomplete, BUTTON_USE_WITHOUT) == ChoiceAction.SKIP

    def test_dismissed(self) -> None:
        """Test None means cancelled."""
        assert interpret_choice(build_no_structure_prompt(), None) == ChoiceAction.CANCELLED

    def test_button_from_other_prompt(self) -> None:
        """Test a button id the prompt did not offer is cancelled."""
        assert interpret_choice(build_no_structure_prompt(), BUTTON_COMPLETE_MISSING) == ChoiceAction.CANCELLED

    def test_unrecognised_response(self) -> None:
        """Test garbage responses are cancelled."""
        assert interpret_choice(build_no_structure_prompt(), 42) == ChoiceAction.CANCELLED
        assert interpret_choice(build_no_structure_prompt(), "yes please") == ChoiceAction.CANCELLED


@pytest.mark.unit
class TestStatusSummary:
    """Test status labels."""

    def test_active(self) -> None:
        """Test a valid structure is active with the summary in the tooltip."""
        result = ValidationResult(valid=True, root_exists=True, existing=["a", "b"], total_expected=2)

        summary = build_status_summary(ReconciliationState.COMPLETE, "full", result)

        assert summary.text == "AFWK: Active"
        assert "AFWK structure complete (2 items verified)" in summary.tooltip
        assert summary.validation == result

    def test_incomplete(self, workspace: Path) -> None:
        """Test a partial structure is incomplete."""
        summary = build_status_summary(ReconciliationState.INCOMPLETE, "pending", partial_result(workspace, 1))

        assert summary.text == "AFWK: Incomplete"
        assert "1/2 (50%)" in summary.tooltip

    def test_not_detected(self, workspace: Path) -> None:
        """Test an absent structure is not detected."""
        summary = build_status_summary(ReconciliationState.INCOMPLETE, "pending", absent_result(workspace))

        assert summary.text == "AFWK: Not detected"

    def test_disabled_and_error(self) -> None:
        """Test disabled and error labels."""
        assert build_status_summary(ReconciliationState.DISABLED, "none").text == "AFWK: Disabled"

        error = build_status_summary(ReconciliationState.ERROR, "pending", error="disk full")
        assert error.text == "AFWK: Error"
        assert "disk full" in error.tooltip

    def test_serializes_camel_case(self) -> None:
        """Test summaries serialize with camelCase keys."""
        result = ValidationResult(valid=True, root_exists=True, existing=["a"], total_expected=1)
        data = build_status_summary(ReconciliationState.COMPLETE, "full", result).model_dump(by_alias=True)

        assert data["validation"]["rootExists"] is True
        assert data["validation"]["totalExpected"] == 1

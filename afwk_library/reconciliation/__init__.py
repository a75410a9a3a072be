"""Reconciliation of workspaces against the AFWK schema.

Public Interface:
    - ReconciliationController: Lifecycle owner for one workspace
    - ChoicePresenter / Notifier: Host capabilities the controller consumes
    - PresetChoicePresenter / LoggingNotifier: Non-interactive implementations
    - build_prompt / interpret_choice: Prompt construction and response mapping
    - build_status_summary: Host-renderable status
"""

from .collaborators import ChoicePresenter
from .collaborators import LoggingNotifier
from .collaborators import Notifier
from .collaborators import PresetChoicePresenter
from .collaborators import StatusListener
from .controller import ReconciliationController
from .prompts import BUTTON_COMPLETE_MISSING
from .prompts import BUTTON_CREATE_FULL
from .prompts import BUTTON_USE_WITHOUT
from .prompts import build_incomplete_prompt
from .prompts import build_no_structure_prompt
from .prompts import build_prompt
from .prompts import interpret_choice
from .status import build_status_summary

__all__ = [
    "BUTTON_COMPLETE_MISSING",
    "BUTTON_CREATE_FULL",
    "BUTTON_USE_WITHOUT",
    "ChoicePresenter",
    "LoggingNotifier",
    "Notifier",
    "PresetChoicePresenter",
    "ReconciliationController",
    "StatusListener",
    "build_incomplete_prompt",
    "build_no_structure_prompt",
    "build_prompt",
    "build_status_summary",
    "interpret_choice",
]

"""Models for afwk library."""

from .base import CamelCaseModel
from .reconciliation import DEFAULT_PREFERENCE
from .reconciliation import PREFERENCE_VALUES
from .reconciliation import ChoiceAction
from .reconciliation import ChoiceButton
from .reconciliation import ChoicePrompt
from .reconciliation import Notification
from .reconciliation import Preference
from .reconciliation import ReconciliationState
from .reconciliation import StatusSummary
from .reconciliation import Trigger
from .schema import Schema
from .schema import SchemaDirectory
from .structure import CreatedPaths
from .structure import ExpectedPath
from .structure import PathKind
from .structure import ValidationResult

__all__ = [
    "CamelCaseModel",
    "ChoiceAction",
    "ChoiceButton",
    "ChoicePrompt",
    "CreatedPaths",
    "DEFAULT_PREFERENCE",
    "ExpectedPath",
    "Notification",
    "PREFERENCE_VALUES",
    "PathKind",
    "Preference",
    "ReconciliationState",
    "Schema",
    "SchemaDirectory",
    "StatusSummary",
    "Trigger",
    "ValidationResult",
]

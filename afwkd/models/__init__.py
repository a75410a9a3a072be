"""API models for afwkd daemon.

This module defines request and response models for the REST API.
"""

from .requests import CompleteStructureRequest
from .requests import PreferenceUpdateRequest
from .requests import ReconcileRequest
from .requests import WorkspaceRequest
from .responses import PreferenceResponse
from .responses import ReconcileResponse
from .responses import RemoveResponse
from .responses import ScaffoldResponse
from .responses import StatusResponse
from .responses import ValidationResponse

__all__ = [
    "CompleteStructureRequest",
    "PreferenceUpdateRequest",
    "ReconcileRequest",
    "WorkspaceRequest",
    "PreferenceResponse",
    "ReconcileResponse",
    "RemoveResponse",
    "ScaffoldResponse",
    "StatusResponse",
    "ValidationResponse",
]

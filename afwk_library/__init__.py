"""AFWK library layer.

Schema-driven project structure validation and incremental scaffolding.
This is the business logic that the afwkd daemon and CLI expose.

Public Interface:
    Modules:
    - models: Schema, validation and reconciliation data structures
    - schema: Built-in schema and schema sources
    - structure: Path collection, validation and scaffolding
    - reconciliation: Lifecycle controller and host collaborators
    - storage: Storage paths, filesystem access, preferences
    - config: Configuration loading
"""

from .models import Schema
from .models import SchemaDirectory
from .models import ValidationResult
from .structure import collect_expected_paths
from .structure import complete_missing_structure
from .structure import create_full_structure
from .structure import get_validation_summary
from .structure import validate_project_structure

__all__ = [
    "Schema",
    "SchemaDirectory",
    "ValidationResult",
    "collect_expected_paths",
    "complete_missing_structure",
    "create_full_structure",
    "get_validation_summary",
    "validate_project_structure",
]

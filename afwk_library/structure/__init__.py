"""Structure validation and scaffolding.

Public Interface:
    - collect_expected_paths: Pre-order expected paths for a schema tree
    - validate_project_structure: Diff a workspace against a schema
    - get_validation_summary: Human-readable validation summary
    - create_full_structure: Build the whole declared structure
    - complete_missing_structure: Create only the missing paths
    - remove_structure: Delete the structure root (maintenance only)
"""

from .collector import build_expected_index
from .collector import collect_expected_entries
from .collector import collect_expected_paths
from .collector import get_structure_root
from .scaffolder import DEFAULT_FILE_DESCRIPTION
from .scaffolder import complete_missing_structure
from .scaffolder import create_full_structure
from .scaffolder import remove_structure
from .scaffolder import render_placeholder
from .validator import format_missing_paths
from .validator import get_validation_summary
from .validator import validate_project_structure

__all__ = [
    "DEFAULT_FILE_DESCRIPTION",
    "build_expected_index",
    "collect_expected_entries",
    "collect_expected_paths",
    "complete_missing_structure",
    "create_full_structure",
    "format_missing_paths",
    "get_structure_root",
    "get_validation_summary",
    "remove_structure",
    "render_placeholder",
    "validate_project_structure",
]

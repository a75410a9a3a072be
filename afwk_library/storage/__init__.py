"""Storage module for afwk_library.

Provides storage locations, filesystem access and preference persistence.

Public Interface:
    - FileSystem / LocalFileSystem: Filesystem access for validation and scaffolding
    - probe: Existence check that never raises
    - PreferenceStore / JsonPreferenceStore: Workspace-scoped preferences
    - get_home_dir: Get AFWK_HOME
    - get_config_dir: Get config directory
    - get_state_dir: Get state directory
    - get_log_dir: Get log directory
    - get_preferences_dir: Get preference directory
"""

from .filesystem import FileSystem
from .filesystem import LocalFileSystem
from .filesystem import probe
from .paths import get_config_dir
from .paths import get_home_dir
from .paths import get_log_dir
from .paths import get_preferences_dir
from .paths import get_state_dir
from .preferences import JsonPreferenceStore
from .preferences import PreferenceStore

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "probe",
    "PreferenceStore",
    "JsonPreferenceStore",
    "get_home_dir",
    "get_config_dir",
    "get_state_dir",
    "get_log_dir",
    "get_preferences_dir",
]

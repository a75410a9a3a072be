"""Path resolution for afwk storage locations.

This module provides path resolution based on the AFWK_HOME environment variable,
following an XDG-like directory structure within that root.

Contract:
- Inputs: Environment variables (AFWK_HOME and per-directory overrides)
- Outputs: Resolved Path objects
- Side Effects: Creates directories if they don't exist
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get AFWK_HOME from environment.

    Returns:
        Path to root directory (default: .afwkd)
    """
    root = os.environ.get("AFWK_HOME", ".afwkd")
    return Path(root).resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($AFWK_HOME/config)
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("AFWK_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_state_dir() -> Path:
    """Get state directory.

    Returns:
        Path to state directory ($AFWK_HOME/state)

    Environment Variables:
        AFWK_STATE_DIR: Override state directory location
        (falls back to $AFWK_HOME/state if not set)
    """
    state_dir: Path = get_home_dir() / "state"

    env_override: str | None = os.environ.get("AFWK_STATE_DIR")
    if env_override is not None:
        state_dir = Path(env_override).resolve()

    state_dir.mkdir(parents=True, exist_ok=True)
    return state_dir


def get_log_dir() -> Path:
    """Get log directory.

    Returns:
        Path to log directory ($AFWK_HOME/logs)
    """
    log_dir: Path = get_home_dir() / "logs"

    env_override: str | None = os.environ.get("AFWK_LOG_DIR")
    if env_override is not None:
        log_dir = Path(env_override).resolve()

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_preferences_dir() -> Path:
    """Get per-workspace preference directory.

    Returns:
        Path to preferences ($AFWK_HOME/state/preferences)
    """
    preferences_dir = get_state_dir() / "preferences"
    preferences_dir.mkdir(parents=True, exist_ok=True)
    return preferences_dir

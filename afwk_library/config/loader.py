"""Configuration loading for afwk.

This module handles loading configuration from YAML files
and environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: AfwkSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import AfwkSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# afwk configuration
# Environment variables (AFWK_*) take precedence over this file

# Daemon settings
host: "127.0.0.1"
port: 8421
log_level: "info"
workers: 1

# Workspace used when a command or request does not name one
# Supports: absolute paths, ~ for home directory, relative paths (./project)
# workspace_path: "."

# Schema document (YAML or JSON). The built-in schema is used when unset.
# schema_path: "~/afwk-schema.yaml"

# Maximum concurrent existence checks during validation
probe_concurrency: 32

# Missing paths listed in a prompt before "...and N more"
max_missing_display: 5
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to afwk.yaml in config directory
    """
    return get_config_dir() / "afwk.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> AfwkSettings:
    """Load configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with AFWK_ (e.g., AFWK_SCHEMA_PATH).

    Args:
        config_path: Optional config file path (default: afwk.yaml in config dir)

    Returns:
        Validated settings

    Example:
        >>> settings = load_config()
        >>> assert isinstance(settings, AfwkSettings)
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings: dict = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                yaml_settings = loaded
            else:
                logger.warning(f"Ignoring config {config_path}: expected a mapping")
            logger.debug(f"Loaded config from {config_path}")
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    # defaults < YAML < env vars: only pass YAML values without an env override
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"AFWK_{str(key).upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = AfwkSettings(**filtered_yaml)

    logger.debug(f"Configuration loaded: workspace={settings.workspace_path}, schema={settings.schema_path or 'built-in'}")

    return settings

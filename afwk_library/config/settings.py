"""Settings models for afwk.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class AfwkSettings(BaseSettings):
    """Configuration for the afwk CLI and daemon.

    Attributes:
        host: Daemon listen address (default: 127.0.0.1)
        port: Daemon listen port (default: 8421)
        log_level: Logging level (default: info)
        workers: Number of daemon workers (default: 1)
        workspace_path: Workspace used when a request names none (default: cwd)
        schema_path: YAML/JSON schema document; built-in schema when unset
        preference_key: Settings key the workspace preference is stored under
        probe_concurrency: Maximum concurrent existence probes per validation
        max_missing_display: Missing paths listed in a prompt before truncating

    Example:
        >>> settings = AfwkSettings()
        >>> assert settings.preference_key == "afwk.preference"
    """

    model_config = SettingsConfigDict(
        env_prefix="AFWK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8421
    log_level: str = "info"
    workers: int = 1

    workspace_path: str = "."
    schema_path: str | None = None

    preference_key: str = "afwk.preference"
    probe_concurrency: int = Field(default=32, ge=1)
    max_missing_display: int = Field(default=5, ge=1)

    @field_validator("workspace_path")
    @classmethod
    def expand_and_resolve_path(cls, v: str) -> str:
        """Expand ~ and resolve to absolute path.

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string
        """
        return str(Path(v).expanduser().resolve())

    @field_validator("schema_path")
    @classmethod
    def expand_schema_path(cls, v: str | None) -> str | None:
        if not v:
            return None
        return str(Path(v).expanduser().resolve())

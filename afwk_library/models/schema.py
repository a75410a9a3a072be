"""Schema models describing the expected AFWK tree.

A schema document has the shape::

    version: "1.0.0"
    root: .afwk
    directories:
      steering:
        description: Project guidance documents
        files:
          tech.md: Technology stack and technical decisions
      kanban:
        description: Project task board
        files: {}
        directories:
          todo:
            description: Tasks ready to start
            files: {}

Mapping order is significant: it is the order in which paths are
enumerated, validated and created.
"""

from __future__ import annotations

from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from afwk_library.models.base import CamelCaseModel


def _check_entry_name(name: str) -> str:
    """Reject names that are not a single path segment."""
    if not name or name in (".", ".."):
        raise ValueError(f"Invalid entry name: {name!r}")
    if "/" in name or "\\" in name:
        raise ValueError(f"Entry name must not contain path separators: {name!r}")
    return name


class SchemaDirectory(CamelCaseModel):
    """One declared directory: its files and nested directories."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(default="", description="Human-readable purpose of the directory")
    files: dict[str, str] = Field(default_factory=dict, description="Filename to description, in declaration order")
    directories: dict[str, SchemaDirectory] | None = Field(
        default=None, description="Nested directories, in declaration order"
    )

    @field_validator("files", "directories")
    @classmethod
    def validate_entry_names(cls, v: dict | None) -> dict | None:
        """Ensure every key names a single path segment."""
        if v:
            for name in v:
                _check_entry_name(name)
        return v


class Schema(CamelCaseModel):
    """Declarative description of an expected project structure.

    Attributes:
        version: Schema version string
        root: Name of the single directory the tree lives under
        directories: Top-level directories of the tree
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(description="Schema version")
    root: str = Field(description="Root directory name, relative to the workspace")
    directories: dict[str, SchemaDirectory] = Field(default_factory=dict, description="Declared tree")

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        return _check_entry_name(v)

    @field_validator("directories")
    @classmethod
    def validate_directory_names(cls, v: dict[str, SchemaDirectory]) -> dict[str, SchemaDirectory]:
        for name in v:
            _check_entry_name(name)
        return v

    @property
    def root_name(self) -> str:
        return self.root

    @property
    def tree(self) -> dict[str, SchemaDirectory]:
        return self.directories

"""Models produced by structure validation and scaffolding."""

from typing import Literal

from pydantic import ConfigDict
from pydantic import Field

from afwk_library.models.base import CamelCaseModel

PathKind = Literal["directory", "file"]

# Absolute paths written by a scaffold call, in creation order.
CreatedPaths = list[str]


class ExpectedPath(CamelCaseModel):
    """A path the schema expects, tagged with what kind of entry it is.

    The kind comes from the schema declaration, so a directory named
    ``v1.0`` or a file named ``Makefile`` is never misclassified by the
    shape of its name.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Absolute path")
    kind: PathKind = Field(description="Whether the schema declares a directory or a file")
    description: str = Field(default="", description="Description declared in the schema")

    @property
    def is_file(self) -> bool:
        return self.kind == "file"


class ValidationResult(CamelCaseModel):
    """Outcome of comparing a workspace against a schema.

    Contract:
    - valid is True exactly when missing is empty
    - root_exists False implies existing is empty and missing holds every
      expected path, the root included
    - root_exists True implies len(missing) + len(existing) == total_expected
    """

    model_config = ConfigDict(frozen=True)

    valid: bool = Field(description="Whether every expected path exists")
    root_exists: bool = Field(description="Whether the structure root directory exists")
    missing: list[str] = Field(default_factory=list, description="Expected paths not found, in schema order")
    existing: list[str] = Field(default_factory=list, description="Expected paths found, root first")
    total_expected: int = Field(description="Number of expected paths including the root")

    @property
    def missing_count(self) -> int:
        return len(self.missing)

    @property
    def existing_count(self) -> int:
        return len(self.existing)

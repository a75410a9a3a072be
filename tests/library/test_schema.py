"""
Unit tests for schema models and sources.

Tests the built-in schema, entry name validation and schema documents on disk.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from afwk_library.config.settings import AfwkSettings
from afwk_library.errors import SchemaSourceError
from afwk_library.models.schema import Schema
from afwk_library.schema.defaults import DEFAULT_SCHEMA
from afwk_library.schema.defaults import get_schema_version
from afwk_library.schema.source import FileSchemaSource
from afwk_library.schema.source import StaticSchemaSource
from afwk_library.schema.source import get_schema_source
from afwk_library.schema.source import load_schema_file
from afwk_library.schema.source import parse_schema_document

SCHEMA_YAML = """
version: "2.0.0"
root: .plan
directories:
  docs:
    description: Documentation
    files:
      README.md: Overview
"""


@pytest.mark.unit
class TestSchemaModel:
    """Test schema model validation."""

    def test_default_schema(self) -> None:
        """Test built-in schema root, version and top-level directories."""
        assert DEFAULT_SCHEMA.root_name == ".afwk"
        assert get_schema_version() == "1.0.0"
        assert list(DEFAULT_SCHEMA.tree) == ["steering", "kanban"]
        assert list(DEFAULT_SCHEMA.tree["kanban"].directories) == ["todo", "in_progress", "completed", "backlog"]

    def test_rejects_separator_in_name(self) -> None:
        """Test entry names must be single path segments."""
        with pytest.raises(ValidationError):
            Schema.model_validate({"version": "1", "root": ".afwk", "directories": {"a/b": {}}})

    def test_rejects_dot_dot_file(self) -> None:
        """Test parent references are rejected in file names."""
        with pytest.raises(ValidationError):
            Schema.model_validate({"version": "1", "root": ".afwk", "directories": {"a": {"files": {"..": ""}}}})

    def test_rejects_empty_root(self) -> None:
        """Test the root name must not be empty."""
        with pytest.raises(ValidationError):
            Schema.model_validate({"version": "1", "root": "", "directories": {}})

    def test_schema_is_frozen(self) -> None:
        """Test schemas cannot be mutated."""
        with pytest.raises(ValidationError):
            DEFAULT_SCHEMA.root = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestSchemaDocuments:
    """Test loading schema documents."""

    def test_parse_rejects_non_mapping(self) -> None:
        """Test a list document is rejected."""
        with pytest.raises(SchemaSourceError, match="mapping"):
            parse_schema_document(["not", "a", "schema"])

    def test_parse_rejects_missing_root(self) -> None:
        """Test a document without a root is rejected."""
        with pytest.raises(SchemaSourceError, match="Invalid schema document"):
            parse_schema_document({"version": "1", "directories": {}})

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test YAML documents load in declaration order."""
        path = tmp_path / "schema.yaml"
        path.write_text(SCHEMA_YAML)

        schema = load_schema_file(path)

        assert schema.version == "2.0.0"
        assert schema.root_name == ".plan"
        assert schema.tree["docs"].files == {"README.md": "Overview"}

    def test_load_json(self, tmp_path: Path) -> None:
        """Test JSON documents are accepted."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"version": "3", "root": ".x", "directories": {"a": {"files": {}}}}))

        assert load_schema_file(path).root_name == ".x"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test an unreadable file raises SchemaSourceError."""
        with pytest.raises(SchemaSourceError, match="Cannot read"):
            load_schema_file(tmp_path / "absent.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises SchemaSourceError."""
        path = tmp_path / "schema.yaml"
        path.write_text("version: [unclosed")

        with pytest.raises(SchemaSourceError, match="Invalid YAML"):
            load_schema_file(path)


@pytest.mark.unit
class TestSchemaSources:
    """Test schema source selection and fetching."""

    @pytest.mark.asyncio
    async def test_static_source(self, small_schema: Schema) -> None:
        """Test the static source returns its schema."""
        assert await StaticSchemaSource(small_schema).fetch_schema() is small_schema

    @pytest.mark.asyncio
    async def test_file_source_rereads(self, tmp_path: Path) -> None:
        """Test the file source reads the document on every fetch."""
        path = tmp_path / "schema.yaml"
        path.write_text(SCHEMA_YAML)
        source = FileSchemaSource(path)

        assert (await source.fetch_schema()).version == "2.0.0"

        path.write_text(SCHEMA_YAML.replace("2.0.0", "2.1.0"))
        assert (await source.fetch_schema()).version == "2.1.0"

    def test_default_source_is_builtin(self) -> None:
        """Test no schema path selects the built-in schema."""
        source = get_schema_source(AfwkSettings(schema_path=None))

        assert isinstance(source, StaticSchemaSource)
        assert source.schema == DEFAULT_SCHEMA

    def test_schema_path_selects_file_source(self, tmp_path: Path) -> None:
        """Test a configured schema path selects the file source."""
        path = tmp_path / "schema.yaml"

        source = get_schema_source(AfwkSettings(schema_path=str(path)))

        assert isinstance(source, FileSchemaSource)
        assert source.path == path.resolve()

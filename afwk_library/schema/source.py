"""Schema sources.

The structure core treats the schema as an opaque asynchronous provider:
whatever produced it is irrelevant once a Schema value exists.

Contract:
- Inputs: Built-in schema, or a YAML/JSON schema document on disk
- Outputs: Validated Schema objects
- Side Effects: None (read-only)
- Errors: SchemaSourceError for unreadable or invalid documents
"""

import asyncio
import logging
from pathlib import Path
from typing import Any
from typing import Protocol

import yaml
from pydantic import ValidationError

from afwk_library.config.settings import AfwkSettings
from afwk_library.errors import SchemaSourceError
from afwk_library.models.schema import Schema

from .defaults import DEFAULT_SCHEMA

logger = logging.getLogger(__name__)


class SchemaSource(Protocol):
    """Provides the schema for one reconciliation cycle."""

    async def fetch_schema(self) -> Schema: ...


class StaticSchemaSource:
    """SchemaSource returning a fixed, in-memory schema."""

    def __init__(self, schema: Schema = DEFAULT_SCHEMA) -> None:
        self.schema = schema

    async def fetch_schema(self) -> Schema:
        return self.schema


class FileSchemaSource:
    """SchemaSource reading a YAML or JSON document from disk on every fetch."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def fetch_schema(self) -> Schema:
        return await asyncio.to_thread(load_schema_file, self.path)


def parse_schema_document(data: Any) -> Schema:
    """Validate a decoded schema document.

    Args:
        data: Decoded YAML/JSON value

    Returns:
        Validated Schema

    Raises:
        SchemaSourceError: If the document is not a valid schema
    """
    if not isinstance(data, dict):
        raise SchemaSourceError(f"Schema document must be a mapping, got {type(data).__name__}")
    try:
        return Schema.model_validate(data)
    except ValidationError as e:
        raise SchemaSourceError(f"Invalid schema document: {e}") from e


def load_schema_file(path: Path) -> Schema:
    """Load a schema document from disk.

    JSON documents are accepted as well, since JSON is a subset of YAML.

    Args:
        path: Path to the schema document

    Returns:
        Validated Schema

    Raises:
        SchemaSourceError: If the file cannot be read, parsed or validated
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SchemaSourceError(f"Cannot read schema file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SchemaSourceError(f"Invalid YAML in schema file {path}: {e}") from e

    schema = parse_schema_document(data)
    logger.debug(f"Loaded schema {schema.version} (root {schema.root_name}) from {path}")
    return schema


def get_schema_source(settings: AfwkSettings) -> SchemaSource:
    """Pick the schema source configured by settings.

    Args:
        settings: Loaded settings

    Returns:
        FileSchemaSource when schema_path is set, the built-in schema otherwise
    """
    if settings.schema_path:
        return FileSchemaSource(Path(settings.schema_path))
    return StaticSchemaSource()

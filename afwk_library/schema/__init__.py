"""Schema definitions and sources."""

from .defaults import DEFAULT_SCHEMA
from .defaults import DEFAULT_SCHEMA_DOCUMENT
from .defaults import get_schema_version
from .source import FileSchemaSource
from .source import SchemaSource
from .source import StaticSchemaSource
from .source import get_schema_source
from .source import load_schema_file
from .source import parse_schema_document

__all__ = [
    "DEFAULT_SCHEMA",
    "DEFAULT_SCHEMA_DOCUMENT",
    "FileSchemaSource",
    "SchemaSource",
    "StaticSchemaSource",
    "get_schema_source",
    "get_schema_version",
    "load_schema_file",
    "parse_schema_document",
]

"""Built-in AFWK schema used when no schema document is configured."""

from afwk_library.models.schema import Schema

DEFAULT_SCHEMA_DOCUMENT: dict = {
    "version": "1.0.0",
    "root": ".afwk",
    "directories": {
        "steering": {
            "description": "Project guidance documents",
            "files": {
                "latest-implementation.md": "Current state of the implementation",
                "product.md": "Product vision and scope",
                "structure.md": "Project structure",
                "tech.md": "Technology stack and technical decisions",
            },
        },
        "kanban": {
            "description": "Project task board",
            "files": {},
            "directories": {
                "todo": {"description": "Tasks ready to start", "files": {}},
                "in_progress": {"description": "Tasks in progress", "files": {}},
                "completed": {"description": "Finished tasks", "files": {}},
                "backlog": {"description": "Tasks waiting to be prioritized", "files": {}},
            },
        },
    },
}

DEFAULT_SCHEMA: Schema = Schema.model_validate(DEFAULT_SCHEMA_DOCUMENT)


def get_schema_version() -> str:
    """Get the version of the built-in schema."""
    return DEFAULT_SCHEMA.version

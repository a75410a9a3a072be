"""Exceptions raised by the afwk library.

Read failures never surface as exceptions: a path that cannot be probed is
reported as missing. Only writes and schema loading raise.
"""


class AfwkError(Exception):
    """Base class for afwk errors."""


class SchemaSourceError(AfwkError):
    """The schema could not be obtained or parsed."""


class CreateError(AfwkError):
    """A directory or file could not be created.

    Paths created before the failure are left in place; scaffolding is
    idempotent, so re-running only creates what is still missing.
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create {path}: {cause}")


class StructurePathError(AfwkError, ValueError):
    """A path given for scaffolding lies outside the structure root."""

    def __init__(self, path: str, root: str) -> None:
        self.path = path
        self.root = root
        super().__init__(f"Path is outside the AFWK structure root {root}: {path}")

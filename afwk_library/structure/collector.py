"""Expected-path enumeration shared by the validator and the scaffolder.

Both consumers walk the schema through this module so they always agree on
the exact set and order of expected paths.

Contract:
- Inputs: Schema tree, base path
- Outputs: Pre-order list of absolute paths (directory, its files, its subdirectories)
- Side Effects: None (no filesystem access)
"""

from collections.abc import Mapping
from pathlib import Path

from afwk_library.models.schema import Schema
from afwk_library.models.schema import SchemaDirectory
from afwk_library.models.structure import ExpectedPath


def get_structure_root(workspace_root: str | Path, schema: Schema) -> Path:
    """Get the directory the schema tree is rooted at inside a workspace."""
    return Path(workspace_root) / schema.root_name


def collect_expected_entries(tree: Mapping[str, SchemaDirectory], base_path: str | Path) -> list[ExpectedPath]:
    """Enumerate every declared directory and file under base_path.

    For each directory in declaration order: the directory itself, then each
    of its files, then everything under its subdirectories, then the next
    sibling. A directory therefore always precedes every path nested in it.

    Args:
        tree: Directory name to declaration
        base_path: Directory the tree is rooted at

    Returns:
        Entries tagged with their declared kind, in pre-order
    """
    entries: list[ExpectedPath] = []
    base = Path(base_path)

    for dir_name, directory in tree.items():
        dir_path = base / dir_name
        entries.append(ExpectedPath(path=str(dir_path), kind="directory", description=directory.description))

        for file_name, description in directory.files.items():
            entries.append(ExpectedPath(path=str(dir_path / file_name), kind="file", description=description))

        if directory.directories:
            entries.extend(collect_expected_entries(directory.directories, dir_path))

    return entries


def collect_expected_paths(tree: Mapping[str, SchemaDirectory], base_path: str | Path) -> list[str]:
    """Enumerate expected absolute paths in pre-order.

    Example:
        >>> schema = Schema.model_validate(
        ...     {"version": "1", "root": ".afwk", "directories": {"steering": {"files": {"tech.md": ""}}}}
        ... )
        >>> collect_expected_paths(schema.tree, "/ws/.afwk")
        ['/ws/.afwk/steering', '/ws/.afwk/steering/tech.md']
    """
    return [entry.path for entry in collect_expected_entries(tree, base_path)]


def build_expected_index(schema: Schema, root_path: str | Path) -> dict[str, ExpectedPath]:
    """Map every expected path, the root included, to its entry.

    Args:
        schema: Schema to index
        root_path: Absolute structure root

    Returns:
        Full path to ExpectedPath
    """
    root = Path(root_path)
    index = {str(root): ExpectedPath(path=str(root), kind="directory", description=f"{schema.root_name} root")}
    for entry in collect_expected_entries(schema.tree, root):
        index[entry.path] = entry
    return index

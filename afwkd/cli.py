"""AFWK CLI for structure validation, scaffolding and the daemon.

Provides the same operations as the REST API for use from a terminal. The
check command runs an interactive reconciliation cycle with click prompts.
"""

import asyncio
import contextlib
import logging
import os
import subprocess
import sys
from pathlib import Path

import click
import uvicorn

from afwk_library.config.loader import load_config
from afwk_library.config.settings import AfwkSettings
from afwk_library.errors import AfwkError
from afwk_library.models.reconciliation import DEFAULT_PREFERENCE
from afwk_library.models.reconciliation import PREFERENCE_VALUES
from afwk_library.models.reconciliation import ChoicePrompt
from afwk_library.models.reconciliation import ReconciliationState
from afwk_library.models.schema import Schema
from afwk_library.reconciliation.controller import ReconciliationController
from afwk_library.schema.source import get_schema_source
from afwk_library.storage.paths import get_log_dir
from afwk_library.storage.preferences import JsonPreferenceStore
from afwk_library.structure.collector import collect_expected_entries
from afwk_library.structure.collector import get_structure_root
from afwk_library.structure.scaffolder import complete_missing_structure
from afwk_library.structure.scaffolder import remove_structure
from afwk_library.structure.validator import format_missing_paths
from afwk_library.structure.validator import get_validation_summary
from afwk_library.structure.validator import validate_project_structure

logger = logging.getLogger(__name__)

DAEMON_LOG_NAME = "daemon.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

workspace_argument = click.argument(
    "workspace",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)


class ClickChoicePresenter:
    """ChoicePresenter that asks on the terminal.

    Buttons are numbered from 1; 0 dismisses the prompt.
    """

    async def present(self, prompt: ChoicePrompt) -> str | None:
        click.echo()
        click.secho(prompt.title, bold=True)
        if prompt.subtitle:
            click.echo(prompt.subtitle)
        click.echo()
        click.echo(prompt.heading)
        click.echo(prompt.body)
        for line in prompt.details:
            click.echo(f"  • {line}")
        click.echo()

        for number, button in enumerate(prompt.buttons, start=1):
            click.echo(f"  {number}) {button.label}")
        click.echo("  0) Dismiss")

        try:
            choice = click.prompt("Choice", type=click.IntRange(0, len(prompt.buttons)), default=0)
        except click.Abort:
            return None

        if choice == 0:
            return None
        return prompt.buttons[choice - 1].id


class EchoNotifier:
    """Notifier that writes to the terminal."""

    def info(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(f"Error: {message}", err=True)


def _resolve_workspace(settings: AfwkSettings, workspace: Path | None) -> Path:
    return (workspace or Path(settings.workspace_path)).resolve()


def _load_schema(settings: AfwkSettings) -> Schema:
    try:
        return asyncio.run(get_schema_source(settings).fetch_schema())
    except AfwkError as e:
        click.echo(f"Error: Failed to load AFWK schema: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--log-level", default="warning", show_default=True, help="Logging level")
@click.option(
    "--schema",
    "schema_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Schema document (YAML or JSON) to use instead of the configured one",
)
@click.pass_context
def cli(ctx, log_level: str, schema_path: Path | None):
    """AFWK - validate and scaffold project structure."""
    settings = load_config()
    if schema_path is not None:
        settings = settings.model_copy(update={"schema_path": str(schema_path.resolve())})

    logging.basicConfig(
        level=log_level.upper(),
        format=LOG_FORMAT,
    )
    ctx.obj = settings


@cli.command()
@workspace_argument
@click.option("--json", "as_json", is_flag=True, help="Print the validation result as JSON")
@click.pass_obj
def validate(settings: AfwkSettings, workspace: Path | None, as_json: bool):
    """Validate WORKSPACE against the schema. Exits 1 when incomplete."""
    root = _resolve_workspace(settings, workspace)
    schema = _load_schema(settings)
    result = asyncio.run(validate_project_structure(root, schema, concurrency=settings.probe_concurrency))

    if as_json:
        click.echo(result.model_dump_json(by_alias=True, indent=2))
    else:
        click.echo(get_validation_summary(result))
        for line in format_missing_paths(root, result.missing, settings.max_missing_display):
            click.echo(f"  missing: {line}")

    if not result.valid:
        sys.exit(1)


@cli.command()
@workspace_argument
@click.pass_obj
def create(settings: AfwkSettings, workspace: Path | None):
    """Create the full structure in WORKSPACE and adopt it."""
    root = _resolve_workspace(settings, workspace)
    controller = ReconciliationController(
        root,
        get_schema_source(settings),
        ClickChoicePresenter(),
        EchoNotifier(),
        settings=settings,
    )

    asyncio.run(controller.create())
    if controller.state == ReconciliationState.ERROR:
        sys.exit(1)


@cli.command()
@workspace_argument
@click.pass_obj
def complete(settings: AfwkSettings, workspace: Path | None):
    """Create only the paths missing from WORKSPACE."""
    root = _resolve_workspace(settings, workspace)
    schema = _load_schema(settings)

    async def run() -> list[str]:
        result = await validate_project_structure(root, schema, concurrency=settings.probe_concurrency)
        if result.valid:
            return []
        return await complete_missing_structure(root, schema, result.missing)

    try:
        created = asyncio.run(run())
    except AfwkError as e:
        click.echo(f"Error: Failed to create AFWK structure: {e}", err=True)
        sys.exit(1)

    if not created:
        click.echo("AFWK structure already complete")
        return

    click.echo(f"AFWK structure completed ({len(created)} items added)")
    for path in created:
        click.echo(f"  created: {Path(path).relative_to(root).as_posix()}")


@cli.command()
@workspace_argument
@click.pass_obj
def check(settings: AfwkSettings, workspace: Path | None):
    """Re-check WORKSPACE, asking what to do when the structure is incomplete.

    Resets a previous "continue without" choice.
    """
    root = _resolve_workspace(settings, workspace)
    controller = ReconciliationController(
        root,
        get_schema_source(settings),
        ClickChoicePresenter(),
        EchoNotifier(),
        settings=settings,
    )

    state = asyncio.run(controller.check())
    status = controller.status
    click.echo(status.text)
    click.echo(status.tooltip)

    if state == ReconciliationState.ERROR:
        sys.exit(1)


@cli.command()
@workspace_argument
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def remove(settings: AfwkSettings, workspace: Path | None, yes: bool):
    """Delete the structure root of WORKSPACE, including its content."""
    root = _resolve_workspace(settings, workspace)
    schema = _load_schema(settings)
    target = get_structure_root(root, schema)

    if not yes:
        click.confirm(f"Delete {target} and everything in it?", abort=True)

    try:
        removed = asyncio.run(remove_structure(root, schema))
    except OSError as e:
        click.echo(f"Error: Failed to remove {target}: {e}", err=True)
        sys.exit(1)

    if removed:
        click.echo(f"Removed {target}")
    else:
        click.echo(f"No AFWK structure at {target}")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the schema document as JSON")
@click.pass_obj
def schema(settings: AfwkSettings, as_json: bool):
    """Show the schema in use."""
    loaded = _load_schema(settings)

    if as_json:
        click.echo(loaded.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        return

    click.echo(f"Version: {loaded.version}")
    click.echo(f"Root:    {loaded.root_name}")
    click.echo(f"Source:  {settings.schema_path or 'built-in'}")
    click.echo()
    for entry in collect_expected_entries(loaded.tree, loaded.root_name):
        suffix = "/" if not entry.is_file else ""
        click.echo(f"  {Path(entry.path).as_posix()}{suffix}")


@cli.group()
def preference():
    """Read or change the workspace preference."""
    pass


@preference.command("get")
@workspace_argument
@click.pass_obj
def preference_get(settings: AfwkSettings, workspace: Path | None):
    """Show the preference of WORKSPACE."""
    root = _resolve_workspace(settings, workspace)
    value = JsonPreferenceStore(root).get(settings.preference_key, DEFAULT_PREFERENCE)
    if value not in PREFERENCE_VALUES:
        value = DEFAULT_PREFERENCE
    click.echo(value)


@preference.command("set")
@click.argument("value", type=click.Choice(list(PREFERENCE_VALUES)))
@workspace_argument
@click.pass_obj
def preference_set(settings: AfwkSettings, value: str, workspace: Path | None):
    """Set the preference of WORKSPACE to VALUE."""
    root = _resolve_workspace(settings, workspace)
    JsonPreferenceStore(root).set(settings.preference_key, value)
    click.echo(f"AFWK preference for {root} set to {value}")


@preference.command("reset")
@workspace_argument
@click.pass_obj
def preference_reset(settings: AfwkSettings, workspace: Path | None):
    """Forget the preference of WORKSPACE so the next check asks again."""
    root = _resolve_workspace(settings, workspace)
    JsonPreferenceStore(root).delete(settings.preference_key)
    click.echo(f"AFWK preference for {root} reset to {DEFAULT_PREFERENCE}")


@cli.command()
@click.option("--host", default=None, help="Listen address (default: from settings)")
@click.option("--port", default=None, type=int, help="Listen port (default: from settings)")
@click.pass_obj
def serve(settings: AfwkSettings, host: str | None, port: int | None):
    """Run the afwkd daemon in the foreground.

    Daemon logs are also written to daemon.log in the log directory.
    """
    # uvicorn imports the app and reloads settings; --schema must reach it through the environment
    if settings.schema_path:
        os.environ["AFWK_SCHEMA_PATH"] = settings.schema_path

    log_file = get_log_dir() / DAEMON_LOG_NAME
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    click.echo(f"Logging to {log_file}")

    try:
        uvicorn.run(
            "afwkd.main:app",
            host=host or settings.host,
            port=port or settings.port,
            log_level=settings.log_level.lower(),
            workers=settings.workers,
        )
    finally:
        root_logger.removeHandler(handler)
        handler.close()


@cli.command()
@click.option("-f", "--follow", is_flag=True, help="Follow log output (like tail -f)")
@click.option("-n", "--lines", default=50, show_default=True, help="Number of lines to show")
def logs(follow: bool, lines: int):
    """Show the daemon log."""
    log_file = get_log_dir() / DAEMON_LOG_NAME
    if not log_file.exists():
        click.echo(f"No logs found at {log_file}")
        return

    if follow:
        with contextlib.suppress(KeyboardInterrupt):
            subprocess.run(["tail", "-f", str(log_file)])
        return

    with open(log_file, encoding="utf-8") as f:
        for line in f.readlines()[-lines:]:
            click.echo(line.rstrip())


def main():
    """Entry point for afwk CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted")
        sys.exit(0)

"""Reconciliation of a workspace against the AFWK schema.

Drives validator, user choice and scaffolder through one lifecycle per
trigger. This is a human-in-the-loop loop, not an autonomous retry loop:
an error and "continue without" both end the cycle.

Contract:
- Inputs: Triggers (workspace opened, manual check, folders changed, create command)
- Outputs: ReconciliationState, StatusSummary, notifications
- Side Effects: Scaffolds the workspace and persists the preference when the user agrees
- Concurrency: Cycles are serialized; a trigger arriving mid-cycle waits its turn
"""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from afwk_library.config.settings import AfwkSettings
from afwk_library.errors import CreateError
from afwk_library.errors import SchemaSourceError
from afwk_library.models.reconciliation import DEFAULT_PREFERENCE
from afwk_library.models.reconciliation import PREFERENCE_VALUES
from afwk_library.models.reconciliation import ChoiceAction
from afwk_library.models.reconciliation import Preference
from afwk_library.models.reconciliation import ReconciliationState
from afwk_library.models.reconciliation import StatusSummary
from afwk_library.models.reconciliation import Trigger
from afwk_library.models.schema import Schema
from afwk_library.models.structure import CreatedPaths
from afwk_library.models.structure import ValidationResult
from afwk_library.schema.source import SchemaSource
from afwk_library.storage.filesystem import FileSystem
from afwk_library.storage.filesystem import LocalFileSystem
from afwk_library.storage.preferences import JsonPreferenceStore
from afwk_library.storage.preferences import PreferenceStore
from afwk_library.structure.scaffolder import complete_missing_structure
from afwk_library.structure.scaffolder import create_full_structure
from afwk_library.structure.validator import validate_project_structure

from .collaborators import ChoicePresenter
from .collaborators import Notifier
from .collaborators import StatusListener
from .prompts import build_prompt
from .prompts import interpret_choice
from .status import build_status_summary

logger = logging.getLogger(__name__)

PreferenceStoreFactory = Callable[[Path], PreferenceStore]


class ReconciliationController:
    """Owns the reconciliation state of one workspace.

    The controller holds the latest ValidationResult and the workspace
    preference; nothing else keeps a reference to them. The schema is fetched
    fresh per cycle and only read.
    """

    def __init__(
        self,
        workspace_root: Path | str | None,
        schema_source: SchemaSource,
        presenter: ChoicePresenter,
        notifier: Notifier,
        preference_store_factory: PreferenceStoreFactory = JsonPreferenceStore,
        fs: FileSystem | None = None,
        settings: AfwkSettings | None = None,
        lock: asyncio.Lock | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            workspace_root: Workspace to reconcile, or None when no folder is open
            schema_source: Provider of the expected structure
            presenter: Shows prompts to the user
            notifier: Receives success and error messages
            preference_store_factory: Builds the preference store for a workspace
            fs: Filesystem (default: local disk)
            settings: Settings (default: AfwkSettings from environment)
            lock: Lock shared with other controllers of the same workspace
        """
        self._schema_source = schema_source
        self._presenter = presenter
        self._notifier = notifier
        self._preference_store_factory = preference_store_factory
        self._fs = fs or LocalFileSystem()
        self._settings = settings or AfwkSettings()
        self._lock = lock or asyncio.Lock()

        self._workspace_root: Path | None = None
        self._preferences: PreferenceStore | None = None
        self._state = ReconciliationState.UNINITIALIZED
        self._validation: ValidationResult | None = None
        self._last_error: str | None = None
        self._status_listeners: list[StatusListener] = []

        self._set_workspace(workspace_root)

    # --- Public state ---

    @property
    def workspace_root(self) -> Path | None:
        return self._workspace_root

    @property
    def state(self) -> ReconciliationState:
        return self._state

    @property
    def current_validation(self) -> ValidationResult | None:
        return self._validation

    @property
    def status(self) -> StatusSummary:
        return build_status_summary(self._state, self.get_preference(), self._validation, self._last_error)

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a callback invoked with the status after every state change."""
        self._status_listeners.append(listener)

    def get_preference(self) -> Preference:
        """Read the persisted preference, treating unknown values as pending."""
        if self._preferences is None:
            return DEFAULT_PREFERENCE
        value = self._preferences.get(self._settings.preference_key, DEFAULT_PREFERENCE)
        if value not in PREFERENCE_VALUES:
            logger.warning(f"Unknown preference value {value!r}, treating as {DEFAULT_PREFERENCE}")
            return DEFAULT_PREFERENCE
        return value  # type: ignore[return-value]

    # --- Triggers ---

    async def on_workspace_opened(self) -> ReconciliationState:
        return await self.reconcile(Trigger.WORKSPACE_OPENED)

    async def check(self) -> ReconciliationState:
        """Manual re-check: resets the preference to pending, then reconciles."""
        return await self.reconcile(Trigger.MANUAL_CHECK)

    async def on_workspace_folders_changed(self, workspace_root: Path | str | None) -> ReconciliationState:
        """Re-target the controller at a new workspace and reconcile it."""
        async with self._lock:
            self._set_workspace(workspace_root)
            return await self._run_cycle(Trigger.FOLDERS_CHANGED)

    async def reconcile(self, trigger: Trigger) -> ReconciliationState:
        """Run one reconciliation cycle, waiting for any cycle in flight."""
        async with self._lock:
            return await self._run_cycle(trigger)

    async def create(self) -> CreatedPaths:
        """Build the full structure without prompting and adopt it.

        Returns:
            Created paths, or an empty list when nothing could be created
        """
        async with self._lock:
            if self._workspace_root is None:
                self._notify_error("No workspace is open")
                return []

            try:
                schema = await self._fetch_schema()
                created = await create_full_structure(self._workspace_root, schema, self._fs)
                self._notify_info(f"AFWK structure created ({len(created)} items)")
                self._save_preference("full")
                self._finish(await self._validate(schema))
                return created
            except SchemaSourceError as e:
                self._fail("Failed to load AFWK schema", e)
            except CreateError as e:
                self._fail("Failed to create AFWK structure", e)
            except Exception as e:
                self._fail("AFWK structure creation failed", e)
            return []

    # --- Cycle ---

    async def _run_cycle(self, trigger: Trigger) -> ReconciliationState:
        if self._workspace_root is None:
            logger.debug(f"Ignoring {trigger.value}: no workspace open")
            self._validation = None
            self._set_state(ReconciliationState.UNINITIALIZED)
            return self._state

        logger.info(f"Reconciling {self._workspace_root} ({trigger.value})")

        try:
            if trigger == Trigger.MANUAL_CHECK:
                self._save_preference("pending")

            preference = self.get_preference()
            if preference == "none":
                self._set_state(ReconciliationState.DISABLED)
                return self._state

            self._last_error = None
            self._set_state(ReconciliationState.CHECKING)

            schema = await self._fetch_schema()
            validation = await self._validate(schema)
            self._finish(validation)

            if validation.valid:
                return self._state

            if preference != "pending":
                logger.info(f"Structure incomplete; preference is {preference}, not prompting")
                return self._state

            action = await self._ask(validation, schema)

            if action in (ChoiceAction.CREATE, ChoiceAction.COMPLETE):
                await self._scaffold(schema, validation, action)
            elif action == ChoiceAction.SKIP:
                self._save_preference("none")
                self._set_state(ReconciliationState.DISABLED)
            else:
                logger.info("Prompt dismissed; preference unchanged")

        except SchemaSourceError as e:
            self._fail("Failed to load AFWK schema", e)
        except CreateError as e:
            self._fail("Failed to create AFWK structure", e)
        except Exception as e:
            self._fail("AFWK structure check failed", e)

        return self._state

    async def _ask(self, validation: ValidationResult, schema: Schema) -> ChoiceAction:
        prompt = build_prompt(
            self._workspace_root,
            validation,
            root_name=schema.root_name,
            max_display=self._settings.max_missing_display,
        )
        try:
            response = await self._presenter.present(prompt)
        except Exception as e:
            logger.warning(f"Prompt {prompt.id} failed, treating as dismissed: {e}")
            response = None
        return interpret_choice(prompt, response)

    async def _scaffold(self, schema: Schema, validation: ValidationResult, action: ChoiceAction) -> None:
        if action == ChoiceAction.CREATE:
            created = await create_full_structure(self._workspace_root, schema, self._fs)
            self._notify_info(f"AFWK structure created ({len(created)} items)")
        else:
            created = await complete_missing_structure(self._workspace_root, schema, validation.missing, self._fs)
            self._notify_info(f"AFWK structure completed ({len(created)} items added)")

        revalidated = await self._validate(schema)
        self._save_preference("full")
        self._finish(revalidated)

    async def _fetch_schema(self) -> Schema:
        try:
            return await self._schema_source.fetch_schema()
        except SchemaSourceError:
            raise
        except Exception as e:
            raise SchemaSourceError(str(e)) from e

    async def _validate(self, schema: Schema) -> ValidationResult:
        return await validate_project_structure(
            self._workspace_root,
            schema,
            self._fs,
            concurrency=self._settings.probe_concurrency,
        )

    # --- Helpers ---

    def _set_workspace(self, workspace_root: Path | str | None) -> None:
        if workspace_root is None:
            self._workspace_root = None
            self._preferences = None
        else:
            self._workspace_root = Path(workspace_root).resolve()
            self._preferences = self._preference_store_factory(self._workspace_root)
        self._validation = None
        self._last_error = None
        self._state = ReconciliationState.UNINITIALIZED

    def _finish(self, validation: ValidationResult) -> None:
        self._validation = validation
        self._set_state(ReconciliationState.COMPLETE if validation.valid else ReconciliationState.INCOMPLETE)

    def _save_preference(self, preference: Preference) -> None:
        if self._preferences is None:
            return
        self._preferences.set(self._settings.preference_key, preference)
        logger.info(f"AFWK preference for {self._workspace_root} set to {preference}")

    def _set_state(self, state: ReconciliationState) -> None:
        self._state = state
        summary = self.status
        for listener in list(self._status_listeners):
            try:
                listener(summary)
            except Exception as e:
                logger.warning(f"Status listener failed: {e}")

    def _fail(self, context: str, error: Exception) -> None:
        logger.error(f"{context}: {error}", exc_info=True)
        self._last_error = str(error)
        self._notify_error(f"{context}: {error}")
        self._set_state(ReconciliationState.ERROR)

    def _notify_info(self, message: str) -> None:
        try:
            self._notifier.info(message)
        except Exception as e:
            logger.warning(f"Notifier failed: {e}")

    def _notify_error(self, message: str) -> None:
        try:
            self._notifier.error(message)
        except Exception as e:
            logger.warning(f"Notifier failed: {e}")

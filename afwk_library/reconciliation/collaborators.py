"""Host capabilities consumed by the reconciliation controller."""

import logging
from collections.abc import Callable
from typing import Protocol

from afwk_library.models.reconciliation import ChoicePrompt
from afwk_library.models.reconciliation import StatusSummary

logger = logging.getLogger(__name__)

StatusListener = Callable[[StatusSummary], None]


class ChoicePresenter(Protocol):
    """Shows a prompt and waits for the user.

    Returns the chosen button id, or None when the prompt was dismissed.
    """

    async def present(self, prompt: ChoicePrompt) -> str | None: ...


class Notifier(Protocol):
    """Fire-and-forget user notifications."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class PresetChoicePresenter:
    """ChoicePresenter answering every prompt with a preset button id.

    Used by non-interactive callers that decide up front; the prompts seen
    are kept so the caller can report what would have been asked.
    """

    def __init__(self, choice: str | None = None) -> None:
        self.choice = choice
        self.prompts: list[ChoicePrompt] = []

    async def present(self, prompt: ChoicePrompt) -> str | None:
        self.prompts.append(prompt)
        return self.choice

    @property
    def last_prompt(self) -> ChoicePrompt | None:
        return self.prompts[-1] if self.prompts else None


class LoggingNotifier:
    """Notifier that only writes to the log."""

    def info(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)

"""Notification surface for validation and loading signals.

The pipeline reports problems with a CBOM as *signals* rather than
exceptions. A ``Notifier`` collects each distinct ``ErrorStatus`` raised while
a document is processed and logs it, so that CLI commands and report layers
can decide how to present it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorStatus(str, Enum):
    """Kinds of signals the pipeline can raise."""

    INVALID_CBOM = "invalid-cbom"
    IGNORED_COMPONENT = "ignored-component"
    JSON_PARSING = "json-parsing"

    @property
    def is_error(self) -> bool:
        """``IGNORED_COMPONENT`` is informational; everything else is an error."""
        return self is not ErrorStatus.IGNORED_COMPONENT


_MESSAGES: dict[ErrorStatus, str] = {
    ErrorStatus.INVALID_CBOM: "The CBOM is invalid; results may be incomplete.",
    ErrorStatus.IGNORED_COMPONENT: "Some components are not cryptographic assets and were ignored.",
    ErrorStatus.JSON_PARSING: "The CBOM could not be parsed.",
}


def status_message(status: ErrorStatus) -> str:
    """Return the human-readable message for a status."""
    return _MESSAGES[status]


@dataclass
class Notifier:
    """Collects pipeline signals for one document load.

    Each status is recorded once, in the order first raised. Every call is
    logged, with ``detail`` when provided.

    Attributes:
        statuses: Distinct statuses raised so far.
    """

    statuses: list[ErrorStatus] = field(default_factory=list)

    def add(self, status: ErrorStatus, detail: str = "") -> None:
        """Record a signal."""
        text = detail or status_message(status)
        if status.is_error:
            logger.error("%s: %s", status.value, text)
        else:
            logger.warning("%s: %s", status.value, text)
        if status not in self.statuses:
            self.statuses.append(status)

    def has(self, status: ErrorStatus) -> bool:
        return status in self.statuses

    @property
    def has_errors(self) -> bool:
        """True if any recorded status is an error."""
        return any(s.is_error for s in self.statuses)

    def clear(self) -> None:
        self.statuses.clear()

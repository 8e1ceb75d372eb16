"""Structural checks on a CBOM before it is processed.

The validator checks only what the pipeline needs; it is not a CycloneDX
schema validator.  It never raises: problems are collected into a
``ValidationReport`` and raised as signals on a ``Notifier``, and processing
continues on a best-effort basis.

Field presence is tested with key membership, never truthiness, so that
``"version": 0`` counts as present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from cbomlens.core.constants import CRYPTO_ASSET_TYPE, MANDATORY_FIELDS
from cbomlens.notifications import ErrorStatus, Notifier

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    """Outcome of ``validate_document``.

    Attributes:
        is_valid: False if any structural error was found.
        errors: Error messages, in the order they were found.
        ignores_components: True if at least one component is not a
            cryptographic asset and will be skipped.  Not an error.
        ignored_count: Number of such components.
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    ignores_components: bool = False
    ignored_count: int = 0

    def add_error(self, message: str) -> None:
        self.is_valid = False
        self.errors.append(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "ignoresComponents": self.ignores_components,
            "ignoredCount": self.ignored_count,
        }


def validate_document(document: Any, notifier: Notifier | None = None) -> ValidationReport:
    """Check the fields of *document* that the pipeline relies on.

    Args:
        document: Parsed CBOM (any JSON value).
        notifier: Optional signal sink; receives ``IGNORED_COMPONENT`` and
            ``INVALID_CBOM`` when applicable.

    Returns:
        The collected ``ValidationReport``.
    """
    report = ValidationReport()

    if not isinstance(document, dict):
        report.add_error("CBOM is undefined or null.")
    else:
        for name in MANDATORY_FIELDS:
            if name not in document:
                report.add_error(f"Missing mandatory field: {name}.")
        if "components" in document:
            _check_components(document["components"], report)
        if "dependencies" in document and not isinstance(document["dependencies"], list):
            report.add_error("Dependencies field is not an array.")

    if notifier is not None:
        if report.ignores_components:
            notifier.add(
                ErrorStatus.IGNORED_COMPONENT,
                f"Ignoring {report.ignored_count} non-cryptographic component(s).",
            )
        if not report.is_valid:
            notifier.add(
                ErrorStatus.INVALID_CBOM,
                f"Invalid CBOM detected. {len(report.errors)} errors: "
                + "; ".join(report.errors),
            )
    return report


def _check_components(components: Any, report: ValidationReport) -> None:
    if not isinstance(components, list):
        report.add_error("Components field is not an array.")
        return

    for index, component in enumerate(components):
        if not isinstance(component, dict):
            report.add_error(f"Component at index {index} is not an object.")
            continue
        if "type" not in component:
            report.add_error(f"Component at index {index} is missing mandatory field: type.")
            continue
        if component["type"] != CRYPTO_ASSET_TYPE:
            report.ignores_components = True
            report.ignored_count += 1
            logger.debug(
                "Ignoring component at index %d of type: %s", index, component["type"]
            )
            continue
        if "cryptoProperties" not in component:
            report.add_error(
                f"Component at index {index} is missing mandatory field: cryptoProperties."
            )

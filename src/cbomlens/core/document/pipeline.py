"""Load a CBOM into an explicit document handle.

``load_cbom`` runs the pipeline once, in order:

    validate -> flatten detections -> build dependency index -> normalize quantum data

and returns a ``LoadedCbom`` holding every derived view.  Handles are
immutable, so several documents can be loaded side by side.  ``CbomViewer``
keeps a "current" handle for interactive use and replaces it in a single
assignment once the new one is fully built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from cbomlens.core.dependency import DependencyIndex, DependencyView, build_dependency_index
from cbomlens.core.detections import flatten_detections
from cbomlens.core.document.loader import unwrap_scan_result
from cbomlens.core.document.origin import CodeOrigin, extract_code_origin
from cbomlens.core.document.validator import ValidationReport, validate_document
from cbomlens.core.quantum import (
    ComponentAssessment,
    QuantumSecurity,
    normalize_component_assessment,
    quantum_security_of,
)
from cbomlens.notifications import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedCbom:
    """Everything derived from one CBOM document.

    Attributes:
        document: The parsed CBOM as given (never modified).
        validation: Structural validation outcome.
        detections: One record per evidence occurrence.
        dependency_index: Cross-reference index for this document.
        quantum_security: Normalized document-level quantum block.
        code_origin: Provenance of the scanned code.
    """

    document: Any
    validation: ValidationReport
    detections: list[dict[str, Any]] = field(default_factory=list)
    dependency_index: DependencyIndex = field(default_factory=DependencyIndex.empty)
    quantum_security: QuantumSecurity = field(
        default_factory=lambda: quantum_security_of(None)
    )
    code_origin: CodeOrigin = field(default_factory=CodeOrigin)

    def dependencies(self, ref: str) -> DependencyView:
        """Resolved neighbours of the asset with ``bom-ref`` *ref*."""
        return self.dependency_index.query(ref)

    def assessment(self, asset: Any) -> ComponentAssessment:
        """Normalized quantum assessment of *asset*."""
        return normalize_component_assessment(asset)

    @property
    def is_empty(self) -> bool:
        return not self.detections


def load_cbom(
    document: Any,
    notifier: Notifier | None = None,
    origin: CodeOrigin | None = None,
) -> LoadedCbom:
    """Run the pipeline over *document*.

    A ``None`` or non-object document short-circuits to an empty handle with
    default quantum data and an invalid validation report.  Never raises.

    Args:
        document: Parsed CBOM.
        notifier: Signal sink for validation results.
        origin: Provenance supplied by the caller; values found in
            ``metadata.properties`` take precedence.
    """
    validation = validate_document(document, notifier)
    base_origin = origin or CodeOrigin()

    if not isinstance(document, dict):
        logger.debug("No CBOM object to load; returning empty result")
        return LoadedCbom(document=document, validation=validation, code_origin=base_origin)

    detections = flatten_detections(document)
    index = build_dependency_index(document, detections)
    quantum = quantum_security_of(document)
    found = extract_code_origin(document)

    logger.debug(
        "Loaded CBOM %s: %d detection(s), %d edge(s)",
        document.get("serialNumber", "<no serial>"),
        len(detections),
        len(index),
    )
    return LoadedCbom(
        document=document,
        validation=validation,
        detections=detections,
        dependency_index=index,
        quantum_security=quantum,
        code_origin=base_origin.merged(**vars(found)),
    )


class CbomViewer:
    """Holds the currently displayed CBOM.

    Each ``show*`` call builds a complete ``LoadedCbom`` before publishing it
    as ``current``; a reader holding the previous handle keeps a consistent
    view of the previous document.

    Thread safety: publication is a single attribute assignment, but
    concurrent ``show*`` calls are not serialised.
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self.notifier = notifier or Notifier()
        self._current: LoadedCbom | None = None

    @property
    def current(self) -> LoadedCbom | None:
        return self._current

    def show(self, document: Any, origin: CodeOrigin | None = None) -> LoadedCbom:
        loaded = load_cbom(document, self.notifier, origin)
        self._current = loaded
        return loaded

    def show_from_upload(self, document: Any, name: str) -> LoadedCbom:
        """Display a CBOM that was uploaded as file *name*."""
        return self.show(document, CodeOrigin(uploaded_file_name=name))

    def show_from_scan(self, scan: Any) -> LoadedCbom:
        """Display the CBOM of a scan result.

        The scan's ``projectIdentifier``, ``gitUrl`` and ``branch`` override
        whatever the CBOM metadata says.
        """
        document = unwrap_scan_result(scan, self.notifier)
        loaded = load_cbom(document, self.notifier)
        if isinstance(scan, dict):
            origin = loaded.code_origin.merged(
                project_identifier=scan.get("projectIdentifier"),
                git_url=scan.get("gitUrl"),
                revision=scan.get("branch"),
            )
            loaded = replace(loaded, code_origin=origin)
        self._current = loaded
        return loaded

    def clear(self) -> None:
        self._current = None

"""Expand cryptographic assets into one detection per occurrence.

A CBOM component lists every place an asset was found under
``evidence.occurrences``.  Report layers work at the grain of a single
occurrence, so each component with K occurrences becomes K detections: deep
copies of the component whose ``occurrences`` list holds exactly one entry.
A component without occurrences becomes a single detection.

Detections are derived on every load and never written back.  Because every
detection is an independent deep copy, mutating one never affects another or
the source document.
"""

from __future__ import annotations

import copy
from typing import Any

from cbomlens.core.constants import CRYPTO_ASSET_TYPE


def flatten_detections(document: Any) -> list[dict[str, Any]]:
    """Return the detections of *document* in component, then occurrence, order.

    Only components whose ``type`` is ``cryptographic-asset`` are expanded.
    Display names are cleaned with ``strip_reference_suffix``.  A document
    that is not an object, or whose ``components`` is absent or not a list,
    yields ``[]``.
    """
    if not isinstance(document, dict):
        return []
    components = document.get("components")
    if not isinstance(components, list):
        return []

    detections: list[dict[str, Any]] = []
    for component in components:
        if not isinstance(component, dict) or component.get("type") != CRYPTO_ASSET_TYPE:
            continue
        occurrences = _occurrences_of(component)
        if not occurrences:
            detections.append(copy.deepcopy(component))
            continue
        # Copy the component without its occurrence list once per occurrence.
        shell = dict(component)
        shell["evidence"] = {**component["evidence"], "occurrences": []}
        for occurrence in occurrences:
            detection = copy.deepcopy(shell)
            detection["evidence"]["occurrences"] = [copy.deepcopy(occurrence)]
            detections.append(detection)

    return strip_reference_suffix(detections)


def _occurrences_of(component: dict[str, Any]) -> list[Any]:
    evidence = component.get("evidence")
    if not isinstance(evidence, dict):
        return []
    occurrences = evidence.get("occurrences")
    return occurrences if isinstance(occurrences, list) else []


def strip_reference_suffix(detections: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Drop the ``@<bom-ref>`` suffix some scanners append to names, in place.

    ``"AES128-GCM@3a5f..."`` becomes ``"AES128-GCM"`` (split on the first
    ``@``).  Names without ``@`` are untouched, so applying this twice is the
    same as applying it once.

    Returns:
        The same list, for chaining.
    """
    for detection in detections:
        name = detection.get("name")
        if isinstance(name, str) and "@" in name:
            detection["name"] = name.split("@", 1)[0]
    return detections

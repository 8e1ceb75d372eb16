"""Ingestion-path normalization: write quantum defaults into a document.

A service that stores CBOMs calls ``ensure_quantum_defaults`` before
persisting, so stored documents already carry a complete ``quantumSecurity``
block and a complete ``quantumAssessment`` on every cryptographic asset.
The values written are exactly ``to_dict()`` of what the read path computes,
which makes the operation idempotent and keeps stored and displayed shapes
identical.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from cbomlens.core.constants import CRYPTO_ASSET_TYPE
from cbomlens.core.quantum.normalizer import (
    normalize_component_assessment,
    quantum_security_of,
)

logger = logging.getLogger(__name__)


def ensure_quantum_defaults(document: Any) -> Any:
    """Return a copy of *document* with all quantum data normalized.

    Non-object documents are returned unchanged.  The input is never
    mutated.  ``cryptoProperties`` that is absent or not an object on a
    cryptographic asset is replaced by an object holding only the default
    assessment.
    """
    if not isinstance(document, dict):
        return document

    normalized = copy.deepcopy(document)
    normalized["quantumSecurity"] = quantum_security_of(document).to_dict()

    components = normalized.get("components")
    if not isinstance(components, list):
        return normalized

    count = 0
    for component in components:
        if not isinstance(component, dict):
            continue
        if component.get("type") != CRYPTO_ASSET_TYPE:
            continue
        assessment = normalize_component_assessment(component).to_dict()
        crypto_props = component.get("cryptoProperties")
        if not isinstance(crypto_props, dict):
            crypto_props = {}
            component["cryptoProperties"] = crypto_props
        crypto_props["quantumAssessment"] = assessment
        count += 1

    logger.debug("Normalized quantum assessment on %d component(s)", count)
    return normalized

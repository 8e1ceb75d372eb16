"""Read-path normalization of quantum-security data.

Every function here accepts arbitrary JSON and returns a fully populated
model.  A value of the wrong type is treated as absent at its own level only:
a malformed ``qtrl`` falls back to the default grade without touching the
vectors or the risk model, and a malformed vector field falls back to the
catalog value without touching its siblings.  Nothing here raises.
"""

from __future__ import annotations

from typing import Any

from cbomlens.core.quantum.catalog import (
    DEFAULT_SEVERITY_LEVELS,
    DEFAULT_URGENCY_LEVELS,
    VECTOR_DEFINITIONS,
    find_vector,
    match_vector,
    qtrl_level_field,
    scale_field,
    text_field,
)
from cbomlens.core.quantum.models import (
    ComponentAssessment,
    QtrlGrade,
    QuantumSecurity,
    RiskModel,
    SecurityVector,
)

_VECTOR_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "name"),
    ("full_name", "fullName"),
    ("description", "description"),
    ("status", "status"),
    ("severity", "severity"),
    ("urgency", "urgency"),
    ("notes", "notes"),
)


def default_quantum_security() -> QuantumSecurity:
    """The block used when a document carries no usable ``quantumSecurity``."""
    return QuantumSecurity(
        qtrl=QtrlGrade(),
        vectors=_default_vectors(),
        risk_model=RiskModel(
            severity_levels=DEFAULT_SEVERITY_LEVELS,
            urgency_levels=DEFAULT_URGENCY_LEVELS,
        ),
    )


def _default_vectors() -> tuple[SecurityVector, ...]:
    return tuple(
        SecurityVector(
            id=d.id,
            name=d.name,
            full_name=d.full_name,
            description=d.description,
        )
        for d in VECTOR_DEFINITIONS
    )


def normalize_qtrl(candidate: Any) -> QtrlGrade:
    """Normalize a ``qtrl`` object; each field is defaulted independently."""
    if not isinstance(candidate, dict):
        return QtrlGrade()
    return QtrlGrade(
        level=qtrl_level_field(candidate),
        name=text_field(candidate, "name"),
        conditions=text_field(candidate, "conditions"),
    )


def normalize_vectors(candidates: Any) -> tuple[SecurityVector, ...]:
    """Merge input vectors onto the six canonical vectors.

    Input vectors are matched with ``match_vector``; string fields of a match
    replace the current values, so a later duplicate overrides an earlier
    one.  Unmatched or non-object entries are dropped.  The result always
    holds exactly the canonical vectors, in catalog order.
    """
    merged: dict[str, dict[str, str]] = {
        v.id: {attr: getattr(v, attr) for attr, _ in _VECTOR_TEXT_FIELDS}
        for v in _default_vectors()
    }
    if isinstance(candidates, list):
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            definition = match_vector(candidate)
            if definition is None:
                continue
            current = merged[definition.id]
            for attr, key in _VECTOR_TEXT_FIELDS:
                current[attr] = text_field(candidate, key, current[attr])
    return tuple(
        SecurityVector(id=d.id, **merged[d.id]) for d in VECTOR_DEFINITIONS
    )


def normalize_risk_model(candidate: Any) -> RiskModel:
    """Normalize a ``riskModel`` object; scales default when not lists."""
    if not isinstance(candidate, dict):
        candidate = {}
    return RiskModel(
        severity_levels=scale_field(candidate, "severityLevels", DEFAULT_SEVERITY_LEVELS),
        urgency_levels=scale_field(candidate, "urgencyLevels", DEFAULT_URGENCY_LEVELS),
        notes=text_field(candidate, "notes"),
    )


def normalize_quantum_security(block: Any) -> QuantumSecurity:
    """Normalize the value of a document's ``quantumSecurity`` field."""
    if not isinstance(block, dict):
        return default_quantum_security()
    return QuantumSecurity(
        qtrl=normalize_qtrl(block.get("qtrl")),
        vectors=normalize_vectors(block.get("vectors")),
        risk_model=normalize_risk_model(block.get("riskModel")),
    )


def quantum_security_of(document: Any) -> QuantumSecurity:
    """Normalized ``quantumSecurity`` of a whole document (any JSON value)."""
    if not isinstance(document, dict):
        return default_quantum_security()
    return normalize_quantum_security(document.get("quantumSecurity"))


def normalize_component_assessment(asset: Any) -> ComponentAssessment:
    """Extract ``cryptoProperties.quantumAssessment`` from a component.

    Each of ``vector``, ``severity``, ``urgency`` and ``notes`` defaults to
    the sentinel on its own.  ``vector_name`` resolves a canonical id to its
    short display name and otherwise repeats the raw vector.
    """
    assessment: Any = None
    if isinstance(asset, dict):
        crypto_props = asset.get("cryptoProperties")
        if isinstance(crypto_props, dict):
            assessment = crypto_props.get("quantumAssessment")
    if not isinstance(assessment, dict):
        return ComponentAssessment()

    vector = text_field(assessment, "vector")
    definition = find_vector(vector)
    return ComponentAssessment(
        vector=vector,
        severity=text_field(assessment, "severity"),
        urgency=text_field(assessment, "urgency"),
        notes=text_field(assessment, "notes"),
        vector_name=definition.name if definition else vector,
    )

"""Quantum-readiness assessment: canonical catalog and normalization.

Submodules:
    catalog     -- sentinel, six-vector catalog, default scales, coercion rules
    models      -- QtrlGrade, SecurityVector, RiskModel, QuantumSecurity,
                   ComponentAssessment
    normalizer  -- read-path normalization (never raises)
    ingestion   -- write-path normalization applied before storing a CBOM
"""

from cbomlens.core.quantum.catalog import (
    CATALOG_VERSION,
    DEFAULT_SEVERITY_LEVELS,
    DEFAULT_URGENCY_LEVELS,
    NOT_ANALYSED,
    VECTOR_DEFINITIONS,
    VECTOR_IDS,
    VectorDefinition,
    find_vector,
    vector_definitions,
    vector_description,
    vector_full_name,
)
from cbomlens.core.quantum.ingestion import ensure_quantum_defaults
from cbomlens.core.quantum.models import (
    ComponentAssessment,
    QtrlGrade,
    QuantumSecurity,
    RiskModel,
    SecurityVector,
)
from cbomlens.core.quantum.normalizer import (
    default_quantum_security,
    normalize_component_assessment,
    normalize_qtrl,
    normalize_quantum_security,
    normalize_risk_model,
    normalize_vectors,
    quantum_security_of,
)

__all__ = [
    "CATALOG_VERSION",
    "ComponentAssessment",
    "DEFAULT_SEVERITY_LEVELS",
    "DEFAULT_URGENCY_LEVELS",
    "NOT_ANALYSED",
    "QtrlGrade",
    "QuantumSecurity",
    "RiskModel",
    "SecurityVector",
    "VECTOR_DEFINITIONS",
    "VECTOR_IDS",
    "VectorDefinition",
    "default_quantum_security",
    "ensure_quantum_defaults",
    "find_vector",
    "normalize_component_assessment",
    "normalize_qtrl",
    "normalize_quantum_security",
    "normalize_risk_model",
    "normalize_vectors",
    "quantum_security_of",
    "vector_definitions",
    "vector_description",
    "vector_full_name",
]

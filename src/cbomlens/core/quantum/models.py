"""Normalized quantum-security data models.

- ``QtrlGrade`` -- project-wide Quantum Transition Readiness Level.
- ``SecurityVector`` -- one of the six canonical risk categories, assessed.
- ``RiskModel`` -- ordered severity / urgency scales plus notes.
- ``QuantumSecurity`` -- the complete document-level block.
- ``ComponentAssessment`` -- the per-asset assessment.

Instances are produced only by the normalizer, so every field is always
populated.  ``to_dict()`` emits the stored JSON shape; normalizing that shape
again yields an equal instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cbomlens.core.quantum.catalog import NOT_ANALYSED


@dataclass(frozen=True)
class QtrlGrade:
    """Quantum Transition Readiness Level.

    Attributes:
        level: Grade 0-3, a free-text level, or the sentinel.
        name: Grade label.
        conditions: Conditions attached to the grade.
    """

    level: int | str = NOT_ANALYSED
    name: str = NOT_ANALYSED
    conditions: str = NOT_ANALYSED

    @property
    def is_analysed(self) -> bool:
        return self.level != NOT_ANALYSED

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "name": self.name, "conditions": self.conditions}


@dataclass(frozen=True)
class SecurityVector:
    """An assessed security vector.

    ``id`` is always one of the canonical ids; the remaining descriptive
    fields start from the catalog and may be overridden by the document.
    """

    id: str
    name: str
    full_name: str
    description: str
    status: str = NOT_ANALYSED
    severity: str = NOT_ANALYSED
    urgency: str = NOT_ANALYSED
    notes: str = NOT_ANALYSED

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "fullName": self.full_name,
            "description": self.description,
            "status": self.status,
            "severity": self.severity,
            "urgency": self.urgency,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class RiskModel:
    """Ordered severity and urgency scales used by assessments."""

    severity_levels: tuple[Any, ...]
    urgency_levels: tuple[Any, ...]
    notes: str = NOT_ANALYSED

    def to_dict(self) -> dict[str, Any]:
        return {
            "severityLevels": list(self.severity_levels),
            "urgencyLevels": list(self.urgency_levels),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class QuantumSecurity:
    """The normalized document-level ``quantumSecurity`` block."""

    qtrl: QtrlGrade
    vectors: tuple[SecurityVector, ...]
    risk_model: RiskModel

    def vector(self, vector_id: str) -> SecurityVector | None:
        """Return the vector with the given canonical id."""
        for v in self.vectors:
            if v.id == vector_id:
                return v
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "qtrl": self.qtrl.to_dict(),
            "vectors": [v.to_dict() for v in self.vectors],
            "riskModel": self.risk_model.to_dict(),
        }


@dataclass(frozen=True)
class ComponentAssessment:
    """Quantum assessment of a single cryptographic asset.

    Attributes:
        vector: Vector id as written in the document, or the sentinel.
        severity: Severity label, or the sentinel.
        urgency: Urgency label, or the sentinel.
        notes: Free-text notes, or the sentinel.
        vector_name: Catalog short name when ``vector`` is a canonical id,
            otherwise ``vector`` itself.
    """

    vector: str = NOT_ANALYSED
    severity: str = NOT_ANALYSED
    urgency: str = NOT_ANALYSED
    notes: str = NOT_ANALYSED
    vector_name: str = NOT_ANALYSED

    @property
    def is_analysed(self) -> bool:
        return self.vector != NOT_ANALYSED

    def to_dict(self) -> dict[str, Any]:
        """Stored shape (``cryptoProperties.quantumAssessment``).

        ``vector_name`` is derived on read and is not stored.
        """
        return {
            "vector": self.vector,
            "severity": self.severity,
            "urgency": self.urgency,
            "notes": self.notes,
        }

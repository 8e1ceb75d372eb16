"""Canonical quantum-security definitions shared by every normalization path.

This module is the single source of truth for the defaults applied to the
``quantumSecurity`` block and to per-component ``quantumAssessment`` objects.
The display path (``cbomlens.core.quantum.normalizer``) and the ingestion
path (``cbomlens.core.quantum.ingestion``) both read their sentinel, vector
catalog, default scales, and field coercion rules from here.

Bump ``CATALOG_VERSION`` whenever a default, a vector definition, or a
coercion rule changes: stored documents normalized under another version may
then differ from what the read path produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CATALOG_VERSION = "1"

NOT_ANALYSED = "Not analysed"

DEFAULT_SEVERITY_LEVELS: tuple[str, ...] = (
    "critical",
    "high",
    "medium",
    "low",
    "informational",
)
DEFAULT_URGENCY_LEVELS: tuple[str, ...] = DEFAULT_SEVERITY_LEVELS

# QTRL grades run from 0 (no transition work) to 3 (quantum ready).
QTRL_MIN_LEVEL = 0
QTRL_MAX_LEVEL = 3


# ---------------------------------------------------------------------------
# Security vector catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VectorDefinition:
    """One of the six fixed quantum-risk categories.

    Attributes:
        id: Stable identifier used in documents (e.g. ``"thirdParty"``).
        name: Short display name (e.g. ``"Third Party"``).
        full_name: Long display name.
        description: What the vector covers.
    """

    id: str
    name: str
    full_name: str
    description: str


VECTOR_DEFINITIONS: tuple[VectorDefinition, ...] = (
    VectorDefinition(
        id="hndl",
        name="HNDL",
        full_name="Harvest-now-decrypt-later threat",
        description=(
            "Analyses storage exposure in data at rest, traffic analysis "
            "exposure, and long-term data retention policies."
        ),
    ),
    VectorDefinition(
        id="authentication",
        name="Authentication",
        full_name="Authentication threat",
        description=(
            "Analyses digital signatures, certificate management, and "
            "multi-factor authentication."
        ),
    ),
    VectorDefinition(
        id="kml",
        name="KML",
        full_name="Key management and lifecycle",
        description=(
            "Analyses quantum robustness of key storage, rotation, "
            "destruction, and escrow policies."
        ),
    ),
    VectorDefinition(
        id="thirdParty",
        name="Third Party",
        full_name="Dependency on third parties",
        description=(
            "Analyses vendor quantum readiness, library dependencies, API "
            "security, and supply chain risks."
        ),
    ),
    VectorDefinition(
        id="cryptoAgility",
        name="Crypto Agility",
        full_name="Cryptographic agility",
        description=(
            "Analyses cryptographic abstraction layers, protocol flexibility, "
            "update mechanisms, and hybrid algorithms."
        ),
    ),
    VectorDefinition(
        id="governance",
        name="Compliance",
        full_name="Governance and compliance",
        description=(
            "Analyses compliance with NIST, CNSA 2.0, ETSI, ISO/IEC standards "
            "and breach detection processes."
        ),
    ),
)

VECTOR_IDS: tuple[str, ...] = tuple(d.id for d in VECTOR_DEFINITIONS)

_BY_ID: dict[str, VectorDefinition] = {d.id: d for d in VECTOR_DEFINITIONS}
_BY_LABEL: dict[str, VectorDefinition] = {}
for _definition in VECTOR_DEFINITIONS:
    for _label in (_definition.id, _definition.name, _definition.full_name):
        _BY_LABEL.setdefault(_label.casefold(), _definition)


def vector_definitions() -> list[VectorDefinition]:
    """Return the vector catalog in canonical order."""
    return list(VECTOR_DEFINITIONS)


def find_vector(vector_id: object) -> VectorDefinition | None:
    """Look up a definition by exact id."""
    if not isinstance(vector_id, str):
        return None
    return _BY_ID.get(vector_id)


def match_vector(candidate: dict[str, Any]) -> VectorDefinition | None:
    """Find the canonical vector an input vector object refers to.

    Matches on ``id`` first; failing that, on ``name`` compared
    case-insensitively against each definition's id, short name and full
    name.  Non-string values never match.
    """
    definition = find_vector(candidate.get("id"))
    if definition is not None:
        return definition
    name = candidate.get("name")
    if isinstance(name, str):
        return _BY_LABEL.get(name.casefold())
    return None


def vector_description(vector_id: str) -> str:
    """Description of a vector, or ``""`` when the id is unknown."""
    definition = find_vector(vector_id)
    return definition.description if definition else ""


def vector_full_name(vector_id: str) -> str:
    """Full name of a vector, or ``""`` when the id is unknown."""
    definition = find_vector(vector_id)
    return definition.full_name if definition else ""


# ---------------------------------------------------------------------------
# Field coercion rules
# ---------------------------------------------------------------------------


def text_field(source: dict[str, Any], key: str, default: str = NOT_ANALYSED) -> str:
    """Return ``source[key]`` when it is a string, else *default*."""
    value = source.get(key)
    return value if isinstance(value, str) else default


def qtrl_level_field(source: dict[str, Any]) -> int | str:
    """Return the QTRL level when it is an int grade (0-3) or a string."""
    value = source.get("level")
    if isinstance(value, bool):
        return NOT_ANALYSED
    if isinstance(value, int) and QTRL_MIN_LEVEL <= value <= QTRL_MAX_LEVEL:
        return value
    if isinstance(value, str):
        return value
    return NOT_ANALYSED


def scale_field(
    source: dict[str, Any], key: str, default: tuple[str, ...]
) -> tuple[Any, ...]:
    """Return ``source[key]`` as a tuple when it is a list, else *default*."""
    value = source.get(key)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return default

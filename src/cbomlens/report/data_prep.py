"""Prepare a loaded CBOM for report and export layers.

Transforms a ``LoadedCbom`` into plain dictionaries that can be serialised
to JSON and laid out by any renderer (terminal tables, HTML, paginated
export).  Layout is not decided here.

All public functions are pure transformations: no side effects, no I/O.
They never raise on empty or malformed input; degenerate cases produce
sensible defaults (empty lists, zero counts, ``None`` for "not analysed").
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from cbomlens import __version__
from cbomlens.core.dependency import DependencyView
from cbomlens.core.document import CodeOrigin, LoadedCbom
from cbomlens.core.paths import MISSING, resolve_path
from cbomlens.core.quantum import (
    CATALOG_VERSION,
    NOT_ANALYSED,
    QuantumSecurity,
    find_vector,
    normalize_component_assessment,
)

# Labelled attribute paths shown in an asset's specification section.
SPECIFICATION_PATHS: tuple[tuple[str, str], ...] = (
    ("Asset Type", "cryptoProperties.assetType"),
    ("Primitive", "cryptoProperties.algorithmProperties.primitive"),
    ("Parameter Set Identifier", "cryptoProperties.algorithmProperties.parameterSetIdentifier"),
    ("Curve", "cryptoProperties.algorithmProperties.curve"),
    ("Execution Environment", "cryptoProperties.algorithmProperties.executionEnvironment"),
    ("Implementation Platform", "cryptoProperties.algorithmProperties.implementationPlatform"),
    ("Certification Level", "cryptoProperties.algorithmProperties.certificationLevel"),
    ("Mode", "cryptoProperties.algorithmProperties.mode"),
    ("Padding", "cryptoProperties.algorithmProperties.padding"),
    ("Crypto Functions", "cryptoProperties.algorithmProperties.cryptoFunctions"),
    ("Classical Security Level", "cryptoProperties.algorithmProperties.classicalSecurityLevel"),
    ("NIST Quantum Security Level", "cryptoProperties.algorithmProperties.nistQuantumSecurityLevel"),
    ("Subject Name", "cryptoProperties.certificateProperties.subjectName"),
    ("Issuer Name", "cryptoProperties.certificateProperties.issuerName"),
    ("Not Valid Before", "cryptoProperties.certificateProperties.notValidBefore"),
    ("Not Valid After", "cryptoProperties.certificateProperties.notValidAfter"),
    ("Signature Algorithm Reference", "cryptoProperties.certificateProperties.signatureAlgorithmRef"),
    ("Subject Public Key Reference", "cryptoProperties.certificateProperties.subjectPublicKeyRef"),
    ("Certificate Format", "cryptoProperties.certificateProperties.certificateFormat"),
    ("Certificate Extension", "cryptoProperties.certificateProperties.certificateExtension"),
    ("Type", "cryptoProperties.relatedCryptoMaterialProperties.type"),
    ("ID", "cryptoProperties.relatedCryptoMaterialProperties.id"),
    ("State", "cryptoProperties.relatedCryptoMaterialProperties.state"),
    ("Algorithm Reference", "cryptoProperties.relatedCryptoMaterialProperties.algorithmRef"),
    ("Creation Date", "cryptoProperties.relatedCryptoMaterialProperties.creationDate"),
    ("Activation Date", "cryptoProperties.relatedCryptoMaterialProperties.activationDate"),
    ("Update Date", "cryptoProperties.relatedCryptoMaterialProperties.updateDate"),
    ("Expiration Date", "cryptoProperties.relatedCryptoMaterialProperties.expirationDate"),
    ("Value", "cryptoProperties.relatedCryptoMaterialProperties.value"),
    ("Size", "cryptoProperties.relatedCryptoMaterialProperties.size"),
    ("Format", "cryptoProperties.relatedCryptoMaterialProperties.format"),
    ("Secured By", "cryptoProperties.relatedCryptoMaterialProperties.securedBy"),
    ("Type", "cryptoProperties.protocolProperties.type"),
    ("Version", "cryptoProperties.protocolProperties.version"),
    ("Cipher Suites", "cryptoProperties.protocolProperties.cipherSuites"),
    ("IKEv2 Transform Types", "cryptoProperties.protocolProperties.ikev2TransformTypes"),
    ("Cryptographic References", "cryptoProperties.protocolProperties.cryptoRefArray"),
    ("OID", "cryptoProperties.oid"),
    ("BOM Reference", "bom-ref"),
)

_NOT_AVAILABLE = "N/A"


# -- Small accessors ------------------------------------------------------


def _first(asset: Any, path: str) -> Any:
    values = resolve_path(asset, path)
    return values[0] if values else None


def asset_type(asset: Any) -> str:
    """``cryptoProperties.assetType``, or ``"unknown"``."""
    value = _first(asset, "cryptoProperties.assetType")
    return value if isinstance(value, str) else "unknown"


def asset_primitive(asset: Any) -> str | None:
    value = _first(asset, "cryptoProperties.algorithmProperties.primitive")
    return value if isinstance(value, str) else None


def asset_location(asset: Any) -> str | None:
    """``file:line`` of the asset's first occurrence, file name only."""
    occurrence = _first(asset, "evidence.occurrences")
    if not isinstance(occurrence, dict):
        return None
    location = occurrence.get("location")
    file_name = location.rsplit("/", 1)[-1] if isinstance(location, str) else ""
    line = occurrence.get("line")
    if line is None or line == "":
        return file_name or None
    return f"{file_name}:{line}"


def _sentinel_to_none(value: Any) -> Any:
    return None if value == NOT_ANALYSED else value


# -- Sections -------------------------------------------------------------


def prepare_header(origin: CodeOrigin) -> dict[str, Any]:
    """Report title and provenance tags."""
    if origin.uploaded_file_name:
        title = f"{origin.uploaded_file_name} (uploaded)"
    elif origin.project_identifier:
        title = origin.project_identifier
    else:
        title = "CBOM Report"

    tags: list[str] = []
    if origin.git_url:
        tags.append(f"gitUrl: {origin.git_url}")
    if origin.revision:
        tags.append(f"revision: {origin.revision}")
    if origin.commit_id:
        tags.append(f"commit: {str(origin.commit_id)[:7]}")
    if origin.subfolder:
        tags.append(f"subfolder: {origin.subfolder}")
    return {"title": title, "tags": tags}


def count_values(detections: list[dict[str, Any]], path: str) -> list[tuple[str, int]]:
    """Count string values found at *path* across detections, most common first.

    Ties keep first-seen order.
    """
    counter: Counter[str] = Counter()
    for detection in detections:
        values = resolve_path(detection, path)
        if values is MISSING:
            continue
        counter.update(v.lower() for v in values if isinstance(v, str))
    return counter.most_common()


def prepare_summary(detections: list[dict[str, Any]]) -> dict[str, Any]:
    """Asset counts and the primitive / function / name distributions."""
    names = Counter(
        d["name"].upper() for d in detections if isinstance(d.get("name"), str)
    ).most_common()
    primitives = count_values(detections, "cryptoProperties.algorithmProperties.primitive")
    functions = count_values(detections, "cryptoProperties.algorithmProperties.cryptoFunctions")
    return {
        "assetCount": len(detections),
        "uniqueNamesCount": len(names),
        "typesCount": len(primitives),
        "names": [{"name": n, "count": c} for n, c in names],
        "primitives": [{"name": p, "count": c} for p, c in primitives],
        "functions": [{"name": f, "count": c} for f, c in functions],
    }


def prepare_quantum_summary(quantum: QuantumSecurity) -> dict[str, Any]:
    """Display view of the quantum block; "not analysed" becomes ``None``."""
    vectors = []
    for vector in quantum.vectors:
        definition = find_vector(vector.id)
        vectors.append({
            "id": vector.id,
            "name": definition.name if definition else vector.name,
            "fullName": vector.full_name,
            "status": vector.status,
            "severity": vector.severity,
            "urgency": vector.urgency,
            "notes": _sentinel_to_none(vector.notes),
        })
    return {
        "qtrl": {
            "level": _sentinel_to_none(quantum.qtrl.level),
            "name": quantum.qtrl.name,
            "conditions": _sentinel_to_none(quantum.qtrl.conditions),
        },
        "vectors": vectors,
        "riskModel": quantum.risk_model.to_dict(),
    }


def prepare_data_table(detections: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """One row per detection for the tabular asset listing."""
    rows = []
    for asset in detections:
        qa = normalize_component_assessment(asset)
        name = asset.get("name")
        rows.append({
            "name": name.upper() if isinstance(name, str) else "UNKNOWN",
            "type": asset_type(asset),
            "primitive": asset_primitive(asset) or _NOT_AVAILABLE,
            "vector": qa.vector_name if qa.is_analysed else _NOT_AVAILABLE,
            "severity": qa.severity if qa.severity != NOT_ANALYSED else _NOT_AVAILABLE,
            "urgency": qa.urgency if qa.urgency != NOT_ANALYSED else _NOT_AVAILABLE,
            "location": asset_location(asset) or "",
        })
    return rows


def prepare_specification(asset: Any) -> list[dict[str, Any]]:
    """Labelled specification properties of an asset.

    Properties whose path is absent, or resolves to no values, are omitted.
    """
    properties = []
    for label, path in SPECIFICATION_PATHS:
        values = resolve_path(asset, path)
        if values is MISSING or not values:
            continue
        properties.append({"name": label, "path": path, "values": list(values)})
    return properties


def _related(pairs: list[tuple[dict[str, Any], str]]) -> list[dict[str, Any]]:
    return [
        {
            "name": asset.get("name") or "Unknown",
            "type": asset_type(asset),
            "bomRef": asset.get("bom-ref") or "",
            "source": origin,
        }
        for asset, origin in pairs
    ]


def prepare_dependencies(view: DependencyView) -> dict[str, Any] | None:
    """The four relation lists of an asset, or ``None`` if all are empty."""
    if view.is_empty:
        return None
    return {
        "dependsOn": _related(view.depends_on),
        "isDependedOn": _related(view.is_depended_on),
        "provides": _related(view.provides),
        "isProvidedBy": _related(view.is_provided_by),
    }


def prepare_asset_detail(asset: dict[str, Any], loaded: LoadedCbom) -> dict[str, Any]:
    """Everything the detail view of one asset shows."""
    qa = normalize_component_assessment(asset)
    ref = asset.get("bom-ref")
    dependencies = (
        prepare_dependencies(loaded.dependencies(ref)) if isinstance(ref, str) else None
    )
    name = asset.get("name")
    return {
        "name": name.upper() if isinstance(name, str) else "UNKNOWN",
        "bomRef": ref,
        "type": asset_type(asset),
        "codeLocation": asset_location(asset),
        "quantumAssessment": {
            "vector": qa.vector_name if qa.is_analysed else None,
            "severity": _sentinel_to_none(qa.severity),
            "urgency": _sentinel_to_none(qa.urgency),
            "notes": _sentinel_to_none(qa.notes),
        },
        "dependencies": dependencies,
        "specification": prepare_specification(asset),
    }


def build_report(loaded: LoadedCbom) -> dict[str, Any]:
    """Assemble the complete report data for *loaded*."""
    return {
        "generator": {"name": "cbomlens", "version": __version__, "catalogVersion": CATALOG_VERSION},
        "header": prepare_header(loaded.code_origin),
        "validation": loaded.validation.to_dict(),
        "summary": prepare_summary(loaded.detections),
        "quantumSecurity": prepare_quantum_summary(loaded.quantum_security),
        "assets": prepare_data_table(loaded.detections),
        "details": [prepare_asset_detail(d, loaded) for d in loaded.detections],
    }

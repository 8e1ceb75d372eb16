"""Shared fixtures for cbomlens tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

_SAMPLE_CBOM: dict[str, Any] = {
    "bomFormat": "CycloneDX",
    "specVersion": "1.6",
    "serialNumber": "urn:uuid:7f2c1a3e-93b1-4c2e-8d1a-2b1f0c9e4a11",
    "version": 1,
    "metadata": {
        "timestamp": "2026-03-02T10:15:00Z",
        "properties": [
            {"name": "gitUrl", "value": "https://github.com/example/payments"},
            {"name": "revision", "value": "main"},
            {"name": "commit", "value": "4be1f0c2d9a7e3b6"},
            {"name": "subfolder", "value": "services/api"},
        ],
    },
    "components": [
        {
            "type": "cryptographic-asset",
            "bom-ref": "alg-aes",
            "name": "AES128-GCM@alg-aes",
            "evidence": {
                "occurrences": [
                    {"location": "src/main/java/Crypto.java", "line": 42, "offset": 17,
                     "additionalContext": "Cipher.getInstance(\"AES/GCM/NoPadding\")"},
                    {"location": "src/main/java/Vault.java", "line": 88, "offset": 9,
                     "additionalContext": "Cipher.getInstance(\"AES/GCM/NoPadding\")"},
                ]
            },
            "cryptoProperties": {
                "assetType": "algorithm",
                "algorithmProperties": {
                    "primitive": "ae",
                    "mode": "gcm",
                    "cryptoFunctions": ["encrypt", "decrypt"],
                    "nistQuantumSecurityLevel": 1,
                },
                "quantumAssessment": {
                    "vector": "hndl",
                    "severity": "high",
                    "urgency": "medium",
                    "notes": "Long-lived records encrypted at rest.",
                },
            },
        },
        {
            "type": "cryptographic-asset",
            "bom-ref": "key-aes",
            "name": "secret-key",
            "evidence": {
                "occurrences": [
                    {"location": "src/main/java/Vault.java", "line": 80, "offset": 5},
                ]
            },
            "cryptoProperties": {
                "assetType": "related-crypto-material",
                "relatedCryptoMaterialProperties": {
                    "type": "secret-key",
                    "algorithmRef": "alg-aes",
                    "size": 128,
                },
            },
        },
        {
            "type": "cryptographic-asset",
            "bom-ref": "alg-rsa",
            "name": "RSA-2048",
            "cryptoProperties": {
                "assetType": "algorithm",
                "algorithmProperties": {"primitive": "signature"},
            },
        },
        {
            "type": "cryptographic-asset",
            "bom-ref": "cert-api",
            "name": "api.example.com",
            "cryptoProperties": {
                "assetType": "certificate",
                "certificateProperties": {
                    "subjectName": "CN=api.example.com",
                    "signatureAlgorithmRef": "alg-rsa",
                    "subjectPublicKeyRef": "key-missing",
                },
            },
        },
        {
            "type": "cryptographic-asset",
            "bom-ref": "proto-tls",
            "name": "TLSv1.3",
            "cryptoProperties": {
                "assetType": "protocol",
                "protocolProperties": {
                    "type": "tls",
                    "version": "1.3",
                    "cipherSuites": [
                        {"name": "TLS_AES_128_GCM_SHA256", "algorithms": ["alg-aes", "alg-sha"]},
                        {"name": "TLS_AES_256_GCM_SHA384", "algorithms": ["alg-aes"]},
                    ],
                },
            },
        },
        {
            "type": "library",
            "bom-ref": "lib-bc",
            "name": "bouncycastle",
        },
    ],
    "dependencies": [
        {"ref": "proto-tls", "dependsOn": ["cert-api"], "provides": ["alg-aes"]},
    ],
    "quantumSecurity": {
        "qtrl": {"level": 1, "name": "Aware"},
        "vectors": [
            {"id": "hndl", "status": "At risk", "severity": "high", "urgency": "high"},
            {"name": "third party", "status": "Reviewed"},
        ],
    },
}


@pytest.fixture
def sample_cbom() -> dict[str, Any]:
    """A small CBOM covering every asset type and reference mechanism."""
    return copy.deepcopy(_SAMPLE_CBOM)


@pytest.fixture
def minimal_cbom() -> dict[str, Any]:
    """A valid CBOM carrying only the mandatory fields."""
    return {
        "bomFormat": "CycloneDX",
        "specVersion": "1.6",
        "serialNumber": "urn:uuid:00000000-0000-4000-8000-000000000000",
        "version": 1,
    }


@pytest.fixture
def cbom_file(tmp_path: Path, sample_cbom: dict[str, Any]) -> Path:
    """The sample CBOM written to a JSON file."""
    path = tmp_path / "cbom.json"
    path.write_text(json.dumps(sample_cbom), encoding="utf-8")
    return path

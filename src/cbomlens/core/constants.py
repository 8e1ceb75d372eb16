"""CycloneDX field names and values the pipeline depends on."""

from __future__ import annotations

CRYPTO_ASSET_TYPE = "cryptographic-asset"

MANDATORY_FIELDS: tuple[str, ...] = (
    "bomFormat",
    "specVersion",
    "serialNumber",
    "version",
)

# Origin tags for edges declared in the top-level ``dependencies`` array.
DEPENDS_ON_ORIGIN = "dependencies.dependsOn"
PROVIDES_ORIGIN = "dependencies.provides"

# Attribute paths inside a cryptographic asset that hold references to other
# assets.  Each resolved value becomes a depends-on edge tagged with its path.
REFERENCE_PATHS: tuple[str, ...] = (
    "cryptoProperties.certificateProperties.signatureAlgorithmRef",
    "cryptoProperties.certificateProperties.subjectPublicKeyRef",
    "cryptoProperties.protocolProperties.cipherSuites.algorithms",
    "cryptoProperties.protocolProperties.ikev2TransformTypes.encr",
    "cryptoProperties.protocolProperties.ikev2TransformTypes.prf",
    "cryptoProperties.protocolProperties.ikev2TransformTypes.integ",
    "cryptoProperties.protocolProperties.ikev2TransformTypes.ke",
    "cryptoProperties.protocolProperties.ikev2TransformTypes.esn",
    "cryptoProperties.protocolProperties.ikev2TransformTypes.auth",
    "cryptoProperties.protocolProperties.cryptoRefArray",
    "cryptoProperties.relatedCryptoMaterialProperties.algorithmRef",
    "cryptoProperties.relatedCryptoMaterialProperties.securedBy.algorithmRef",
)

# ``metadata.properties`` names that describe where the scanned code came from.
CODE_ORIGIN_PROPERTIES: tuple[str, ...] = ("gitUrl", "revision", "subfolder", "commit")

"""Where the scanned code came from, as recorded in CBOM metadata."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class CodeOrigin:
    """Provenance of a loaded CBOM.

    The first four fields come from ``metadata.properties``; the rest are
    supplied by whoever handed the document over (a scan result or an
    uploaded file).
    """

    git_url: str | None = None
    revision: str | None = None
    subfolder: str | None = None
    commit_id: str | None = None
    project_identifier: str | None = None
    uploaded_file_name: str | None = None

    def merged(self, **changes: Any) -> CodeOrigin:
        """Return a copy with the non-None *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return {
            "gitUrl": self.git_url,
            "revision": self.revision,
            "subfolder": self.subfolder,
            "commitID": self.commit_id,
            "projectIdentifier": self.project_identifier,
            "uploadedFileName": self.uploaded_file_name,
        }


_PROPERTY_FIELDS: dict[str, str] = {
    "gitUrl": "git_url",
    "revision": "revision",
    "subfolder": "subfolder",
    "commit": "commit_id",
}


def extract_code_origin(document: Any) -> CodeOrigin:
    """Read ``gitUrl``, ``revision``, ``subfolder`` and ``commit`` from metadata.

    Entries lacking ``name`` or ``value`` are skipped, as are other property
    names.  A later entry with the same name wins.
    """
    if not isinstance(document, dict):
        return CodeOrigin()
    metadata = document.get("metadata")
    if not isinstance(metadata, dict):
        return CodeOrigin()
    properties = metadata.get("properties")
    if not isinstance(properties, list):
        return CodeOrigin()

    values: dict[str, Any] = {}
    for prop in properties:
        if not isinstance(prop, dict) or "name" not in prop or "value" not in prop:
            continue
        attr = _PROPERTY_FIELDS.get(prop["name"]) if isinstance(prop["name"], str) else None
        if attr is not None:
            values[attr] = prop["value"]
    return CodeOrigin(**values)

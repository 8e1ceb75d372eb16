"""Read CBOM files and unwrap scan results.

``read_document`` is the only place in cbomlens that raises for bad input:
it sits outside the core pipeline, where a file that cannot be read or
parsed has no document to report on.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from cbomlens.exceptions import DocumentLoadError
from cbomlens.notifications import ErrorStatus, Notifier

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def read_document(path: Path, notifier: Notifier | None = None) -> Any:
    """Parse a CBOM file.

    ``.yaml`` / ``.yml`` files are read with ``yaml.safe_load``; anything
    else is read as JSON.

    Args:
        path: File to read.
        notifier: Receives ``JSON_PARSING`` when parsing fails.

    Returns:
        The parsed JSON value (normally a dict).

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        if notifier is not None:
            notifier.add(ErrorStatus.JSON_PARSING, f"{path}: {exc}")
        raise DocumentLoadError(f"Cannot load CBOM from {path}: {exc}") from exc


def unwrap_scan_result(scan: Any, notifier: Notifier | None = None) -> Any:
    """Return the CBOM held in a scan result's ``bom`` field.

    When the scan carries no ``bom``, signals ``INVALID_CBOM`` and returns an
    empty document.
    """
    if isinstance(scan, dict) and scan.get("bom") is not None:
        return scan["bom"]
    logger.error("Scan result carries no CBOM")
    if notifier is not None:
        notifier.add(ErrorStatus.INVALID_CBOM, "Scan result carries no CBOM.")
    return {}

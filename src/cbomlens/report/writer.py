"""Serialise report data to JSON text or a file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from cbomlens.core.document import LoadedCbom
from cbomlens.exceptions import ReportError
from cbomlens.report.data_prep import build_report

logger = logging.getLogger(__name__)


def render_report(loaded: LoadedCbom) -> str:
    """Return the report data of *loaded* as indented JSON."""
    return json.dumps(build_report(loaded), indent=2, default=str)


def write_report(loaded: LoadedCbom, output_path: str | Path) -> Path:
    """Render and write the report to a file.

    Args:
        loaded: The loaded CBOM.
        output_path: Destination file path (created or overwritten). Parent
            directories are created if needed.

    Returns:
        The resolved ``Path`` of the written file.

    Raises:
        ReportError: If the file cannot be written.
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_report(loaded) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Cannot write report to {path}: {exc}") from exc
    logger.debug("Report written to %s", path)
    return path.resolve()

"""Attribute path resolution over mixed dict / list JSON trees.

All public names are re-exported here so that callers can write
``from cbomlens.core.paths import resolve_path, MISSING``.
"""

from cbomlens.core.paths.resolver import MISSING, Missing, is_missing, resolve_path

__all__ = [
    "MISSING",
    "Missing",
    "is_missing",
    "resolve_path",
]

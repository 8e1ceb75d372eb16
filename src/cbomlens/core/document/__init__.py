"""CBOM document handling: validation, loading, and the per-document handle.

Submodules:
    validator -- ValidationReport, validate_document
    origin    -- CodeOrigin, extract_code_origin
    loader    -- read_document, unwrap_scan_result
    pipeline  -- LoadedCbom, load_cbom, CbomViewer
"""

from cbomlens.core.document.loader import read_document, unwrap_scan_result
from cbomlens.core.document.origin import CodeOrigin, extract_code_origin
from cbomlens.core.document.pipeline import CbomViewer, LoadedCbom, load_cbom
from cbomlens.core.document.validator import ValidationReport, validate_document

__all__ = [
    "CbomViewer",
    "CodeOrigin",
    "LoadedCbom",
    "ValidationReport",
    "extract_code_origin",
    "load_cbom",
    "read_document",
    "unwrap_scan_result",
    "validate_document",
]

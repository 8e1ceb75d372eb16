"""Report data for loaded CBOMs.

Submodules:
    data_prep  -- Transforms a LoadedCbom into JSON-safe dicts (layout-free).
    writer     -- Serialises the assembled report to JSON text or a file.
"""

from cbomlens.report.data_prep import (
    SPECIFICATION_PATHS,
    asset_location,
    asset_primitive,
    asset_type,
    build_report,
    count_values,
    prepare_asset_detail,
    prepare_data_table,
    prepare_dependencies,
    prepare_header,
    prepare_quantum_summary,
    prepare_specification,
    prepare_summary,
)
from cbomlens.report.writer import render_report, write_report

__all__ = [
    "SPECIFICATION_PATHS",
    "asset_location",
    "asset_primitive",
    "asset_type",
    "build_report",
    "count_values",
    "prepare_asset_detail",
    "prepare_data_table",
    "prepare_dependencies",
    "prepare_header",
    "prepare_quantum_summary",
    "prepare_specification",
    "prepare_summary",
    "render_report",
    "write_report",
]

"""Detection flattening: one report-grain record per evidence occurrence."""

from cbomlens.core.detections.flattener import flatten_detections, strip_reference_suffix

__all__ = [
    "flatten_detections",
    "strip_reference_suffix",
]

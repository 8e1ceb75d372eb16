"""cbomlens exception hierarchy.

The core pipeline never raises for documented input shapes: malformed CBOM
content is reported through validation reports and the notification surface.
These exceptions cover the edges around the core, where files are read and
reports are written.
"""


class CbomLensError(Exception):
    """Base exception for all cbomlens errors."""


class DocumentLoadError(CbomLensError):
    """Raised when a CBOM file cannot be read or parsed.

    Covers missing files, encoding issues, and JSON / YAML syntax errors
    encountered before the document reaches the pipeline.
    """


class ReportError(CbomLensError):
    """Raised when report data cannot be written to its destination."""

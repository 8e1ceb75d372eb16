"""cbomlens: Cryptography Bill of Materials inspection and quantum-readiness views."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

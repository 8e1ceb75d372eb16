"""Shared fixtures for CLI tests.

Provides a Click runner and CBOM files in the shapes the commands must
handle: valid JSON, valid YAML, structurally invalid, and unparseable.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def yaml_file(tmp_path: Path, sample_cbom: dict[str, Any]) -> Path:
    """The sample CBOM written as YAML."""
    path = tmp_path / "cbom.yaml"
    path.write_text(yaml.safe_dump(sample_cbom), encoding="utf-8")
    return path


@pytest.fixture
def invalid_file(tmp_path: Path) -> Path:
    """A CBOM missing its version and holding a component without a type."""
    path = tmp_path / "invalid.json"
    path.write_text(
        json.dumps({
            "bomFormat": "CycloneDX",
            "specVersion": "1.6",
            "serialNumber": "urn:uuid:1",
            "components": [{"name": "AES"}],
        }),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def broken_file(tmp_path: Path) -> Path:
    """A file that is not valid JSON."""
    path = tmp_path / "broken.json"
    path.write_text('{"bomFormat": "CycloneDX", ', encoding="utf-8")
    return path

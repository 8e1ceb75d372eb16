"""cbomlens CLI -- Inspect Cryptography Bills of Materials.

Entry point for the ``cbomlens`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    validate    -- Check the structure of a CBOM.
    detections  -- List cryptographic assets, one row per occurrence.
    deps        -- Show the dependency relations of one asset.
    quantum     -- Show the normalized quantum-readiness assessment.
    normalize   -- Write a CBOM with quantum defaults filled in.
    report      -- Produce report data as JSON.

Usage::

    cbomlens validate cbom.json
    cbomlens detections cbom.json --json
    cbomlens deps cbom.json crypto/algorithm/aes-128-gcm@2.16.840.1.101.3.4.1.6
    cbomlens quantum cbom.json
    cbomlens normalize cbom.json -o stored.json
    cbomlens report cbom.json -o report.json
"""

from __future__ import annotations

import logging

import click

from cbomlens import __version__
from cbomlens.cli.deps_cmd import deps_command
from cbomlens.cli.detections_cmd import detections_command
from cbomlens.cli.normalize_cmd import normalize_command
from cbomlens.cli.quantum_cmd import quantum_command
from cbomlens.cli.report_cmd import report_command
from cbomlens.cli.validate_cmd import validate_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cbomlens: Inspect Cryptography Bills of Materials.

    Flatten cryptographic assets, follow references between them, and
    assess quantum readiness of CycloneDX CBOM documents.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(validate_command)
cli.add_command(detections_command)
cli.add_command(deps_command)
cli.add_command(quantum_command)
cli.add_command(normalize_command)
cli.add_command(report_command)

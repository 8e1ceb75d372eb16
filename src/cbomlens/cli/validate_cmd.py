"""``cbomlens validate <file>`` -- Check the structure of a CBOM.

Exit Codes:
    0 -- The CBOM is structurally valid.
    1 -- The CBOM has structural errors.
    2 -- The file could not be read or parsed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cbomlens.cli._common import INPUT_PATH, load_or_exit


@click.command("validate")
@click.argument("path", type=INPUT_PATH)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Also fail when non-cryptographic components are ignored.",
)
def validate_command(path: Path, as_json: bool, strict: bool) -> None:
    """Validate the CBOM at PATH.

    Exit code 0 if valid, 1 if invalid, 2 if the file cannot be parsed.
    """
    loaded = load_or_exit(path)
    report = loaded.validation

    if as_json:
        from cbomlens.cli.output import print_json
        print_json(report.to_dict())
    else:
        from cbomlens.cli.output import print_validation
        print_validation(report)

    failed = not report.is_valid or (strict and report.ignores_components)
    sys.exit(1 if failed else 0)

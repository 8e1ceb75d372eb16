"""``cbomlens quantum <file>`` -- Show the normalized quantum-readiness assessment."""

from __future__ import annotations

from pathlib import Path

import click

from cbomlens.cli._common import INPUT_PATH, load_or_exit


@click.command("quantum")
@click.argument("path", type=INPUT_PATH)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
def quantum_command(path: Path, as_json: bool) -> None:
    """Show the QTRL grade, security vectors, and risk model of the CBOM at PATH.

    Missing or malformed values are shown as "Not analysed".
    """
    loaded = load_or_exit(path)

    if as_json:
        from cbomlens.cli.output import print_json
        print_json(loaded.quantum_security.to_dict())
    else:
        from cbomlens.cli.output import print_quantum_security
        print_quantum_security(loaded.quantum_security)

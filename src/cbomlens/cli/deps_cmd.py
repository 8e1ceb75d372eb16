"""``cbomlens deps <file> <ref>`` -- Show what an asset references and is referenced by.

Exit Codes:
    0 -- The reference is a known asset.
    1 -- No asset carries the reference.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cbomlens.cli._common import INPUT_PATH, load_or_exit
from cbomlens.report import prepare_dependencies


@click.command("deps")
@click.argument("path", type=INPUT_PATH)
@click.argument("ref", type=str)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
def deps_command(path: Path, ref: str, as_json: bool) -> None:
    """Show the dependency relations of the asset with bom-ref REF."""
    loaded = load_or_exit(path)

    if loaded.dependency_index.asset(ref) is None:
        click.echo(f"No cryptographic asset with bom-ref {ref!r}.")
        sys.exit(1)

    view = loaded.dependencies(ref)
    if as_json:
        from cbomlens.cli.output import print_json
        print_json(prepare_dependencies(view) or {})
    else:
        from cbomlens.cli.output import print_dependencies
        print_dependencies(ref, view)

"""``cbomlens normalize <file>`` -- Apply ingestion-time quantum defaults.

Writes a copy of the CBOM whose ``quantumSecurity`` block and per-asset
``quantumAssessment`` objects are complete, as a storage service would
persist it.  Normalizing an already normalized file produces the same file.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from cbomlens.cli._common import INPUT_PATH
from cbomlens.core.document import read_document
from cbomlens.core.quantum import ensure_quantum_defaults
from cbomlens.exceptions import DocumentLoadError


@click.command("normalize")
@click.argument("path", type=INPUT_PATH)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output path (default: print to stdout).",
)
def normalize_command(path: Path, output: Path | None) -> None:
    """Write the CBOM at PATH with quantum defaults filled in."""
    try:
        document = read_document(path)
    except DocumentLoadError as exc:
        raise click.ClickException(str(exc)) from exc

    normalized = ensure_quantum_defaults(document)
    text = json.dumps(normalized, indent=2, default=str)

    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Normalized CBOM written to: {output}")

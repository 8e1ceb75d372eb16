"""``cbomlens detections <file>`` -- List cryptographic assets per occurrence."""

from __future__ import annotations

from pathlib import Path

import click

from cbomlens.cli._common import INPUT_PATH, load_or_exit


@click.command("detections")
@click.argument("path", type=INPUT_PATH)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
def detections_command(path: Path, as_json: bool) -> None:
    """List every detection (one per evidence occurrence) in the CBOM at PATH."""
    loaded = load_or_exit(path)

    if as_json:
        from cbomlens.cli.output import print_json
        print_json(loaded.detections)
    else:
        from cbomlens.cli.output import print_detections
        print_detections(loaded.detections)

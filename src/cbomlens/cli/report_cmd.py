"""``cbomlens report <file>`` -- Produce the report data of a CBOM as JSON.

The output holds everything a report renderer needs: header, validation,
summary statistics, the quantum-readiness block, the asset table, and one
detail record per detection.
"""

from __future__ import annotations

from pathlib import Path

import click

from cbomlens.cli._common import INPUT_PATH, load_or_exit
from cbomlens.exceptions import ReportError


@click.command("report")
@click.argument("path", type=INPUT_PATH)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output path (default: print to stdout).",
)
def report_command(path: Path, output: Path | None) -> None:
    """Build report data for the CBOM at PATH."""
    loaded = load_or_exit(path)

    if output is None:
        from cbomlens.cli.output import print_json
        from cbomlens.report import build_report
        print_json(build_report(loaded))
        return

    from cbomlens.report import write_report
    try:
        written = write_report(loaded, output)
    except ReportError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Report written to: {written}")

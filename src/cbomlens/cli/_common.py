"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cbomlens.core.document import LoadedCbom, load_cbom, read_document
from cbomlens.exceptions import DocumentLoadError
from cbomlens.notifications import Notifier

INPUT_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


def load_or_exit(path: Path, notifier: Notifier | None = None) -> LoadedCbom:
    """Read and load the CBOM at *path*; exit with code 2 if it cannot be parsed."""
    notifier = notifier or Notifier()
    try:
        document = read_document(path, notifier)
    except DocumentLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    return load_cbom(document, notifier)

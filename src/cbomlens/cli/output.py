"""Rich output formatting helpers for the cbomlens CLI.

Severity Color Mapping:
    critical = bold red, high = yellow, medium = cyan, low = green,
    informational = dim, not analysed = dim italic
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cbomlens.core.dependency import DependencyView
from cbomlens.core.document import ValidationReport
from cbomlens.core.quantum import NOT_ANALYSED, QuantumSecurity
from cbomlens.report import asset_location, asset_type

_SEVERITY_STYLES: dict[str, str] = {
    "critical": "bold red",
    "high": "yellow",
    "medium": "cyan",
    "low": "green",
    "informational": "dim",
}

console = Console()


def severity_style(label: str) -> str:
    """Return the Rich style string for a severity or urgency label."""
    if label == NOT_ANALYSED:
        return "dim italic"
    return _SEVERITY_STYLES.get(label.lower(), "white")


def _styled(label: str) -> Text:
    return Text(label, style=severity_style(label))


def _plain(value: Any) -> Text:
    """Document values are shown literally, never parsed as markup."""
    return Text(str(value))


def print_validation(report: ValidationReport) -> None:
    """Print a validation verdict and its error list."""
    if report.is_valid:
        console.print(Panel("[bold green]Valid CBOM[/bold green]", title="Validation"))
    else:
        console.print(
            Panel(
                f"[bold red]Invalid CBOM[/bold red] ({len(report.errors)} errors)",
                title="Validation",
            )
        )
        for error in report.errors:
            console.print(f"  [red]- {escape(error)}[/red]")
    if report.ignores_components:
        console.print(
            f"[yellow]{report.ignored_count} non-cryptographic component(s) ignored.[/yellow]"
        )


def print_detections(detections: list[dict[str, Any]]) -> None:
    """Print one table row per detection."""
    if not detections:
        console.print("[dim]No cryptographic assets found.[/dim]")
        return

    table = Table(title="Cryptographic Assets", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Type", style="dim")
    table.add_column("BOM Ref", style="dim")
    table.add_column("Location")
    for detection in detections:
        table.add_row(
            _plain(detection.get("name", "Unknown")),
            _plain(asset_type(detection)),
            _plain(detection.get("bom-ref", "-")),
            _plain(asset_location(detection) or "-"),
        )
    console.print(table)
    console.print(f"[bold]{len(detections)}[/bold] detections")


def print_dependencies(ref: str, view: DependencyView) -> None:
    """Print the four relation lists of one asset."""
    console.print(Panel(Text(ref, style="bold"), title="Dependencies"))
    if view.is_empty:
        console.print("[dim]No related assets.[/dim]")
        return

    for title, pairs in (
        ("Depends on", view.depends_on),
        ("Is depended on by", view.is_depended_on),
        ("Provides", view.provides),
        ("Is provided by", view.is_provided_by),
    ):
        if not pairs:
            continue
        table = Table(title=title, show_header=True)
        table.add_column("Asset", style="bold")
        table.add_column("BOM Ref", style="dim")
        table.add_column("Source")
        for asset, origin in pairs:
            table.add_row(
                _plain(asset.get("name", "Unknown")),
                _plain(asset.get("bom-ref", "")),
                origin,
            )
        console.print(table)


def print_quantum_security(quantum: QuantumSecurity) -> None:
    """Print the QTRL grade, vector table, and risk model scales."""
    qtrl = quantum.qtrl
    header = Text.assemble(
        ("Level: ", "bold"), (str(qtrl.level), ""),
        ("  Name: ", "bold"), (qtrl.name, ""),
    )
    console.print(Panel(header, title="Quantum Transition Readiness Level (QTRL)"))
    if qtrl.conditions != NOT_ANALYSED:
        console.print(f"  Conditions: {escape(qtrl.conditions)}")

    table = Table(title="Security Vectors", show_header=True, header_style="bold")
    table.add_column("Vector", style="bold")
    table.add_column("Status")
    table.add_column("Severity", justify="center")
    table.add_column("Urgency", justify="center")
    table.add_column("Notes", style="dim")
    for vector in quantum.vectors:
        table.add_row(
            _plain(vector.name),
            _plain(vector.status),
            _styled(vector.severity),
            _styled(vector.urgency),
            _plain(vector.notes if vector.notes != NOT_ANALYSED else "-"),
        )
    console.print(table)

    risk = quantum.risk_model
    console.print("  Severity scale: " + escape(", ".join(map(str, risk.severity_levels))))
    console.print("  Urgency scale:  " + escape(", ".join(map(str, risk.urgency_levels))))


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout.

    Args:
        data: Any JSON-serializable data structure.
    """
    console.print_json(json.dumps(data, default=str))

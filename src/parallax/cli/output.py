"""Rich output formatting helpers for the Parallax CLI.

Provides consistent, risk-colored terminal output for scan results and
single-app trust breakdowns.

Risk Color Mapping:
    HIGH = bold red, MEDIUM = yellow, LOW = green
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from parallax.core import AppTrustModel, RiskLevel, penalty_for

_RISK_STYLES: dict[RiskLevel, str] = {
    RiskLevel.HIGH: "bold red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "green",
}

console = Console()


def risk_style(level: RiskLevel) -> str:
    """Return the Rich style string for a given risk level."""
    return _RISK_STYLES.get(level, "white")


def _risk_text(level: RiskLevel) -> Text:
    return Text(level.value.upper(), style=risk_style(level))


def print_scan_results(models: list[AppTrustModel]) -> None:
    """Print a summary table of trust models for multiple apps.

    Args:
        models: Trust models, already sorted and filtered by the caller.
    """
    if not models:
        console.print("[dim]No apps match the selected filters.[/dim]")
        return

    table = Table(title="Parallax App Trust", show_header=True, header_style="bold")
    table.add_column("App", style="bold")
    table.add_column("Version", style="dim")
    table.add_column("Confinement")
    table.add_column("Score", justify="right")
    table.add_column("Risk", justify="center")
    table.add_column("Signals", justify="right")

    for model in models:
        table.add_row(
            Text(model.display_name),
            Text(model.version or "-"),
            model.confinement.value,
            str(model.trust.score),
            _risk_text(model.trust.risk_level),
            str(len(model.signals)),
        )

    console.print(table)
    _print_scan_summary(models)


def _print_scan_summary(models: list[AppTrustModel]) -> None:
    """Print a one-line summary after the results table."""
    counts = {level: 0 for level in RiskLevel}
    for model in models:
        counts[model.trust.risk_level] += 1
    parts = [f"[bold]{len(models)}[/bold] apps evaluated"]
    for level in RiskLevel:
        if counts[level]:
            style = risk_style(level)
            parts.append(f"[{style}]{counts[level]} {level.value} risk[/{style}]")
    console.print(" | ".join(parts))


def print_trust_model(model: AppTrustModel) -> None:
    """Print a detailed trust breakdown for a single app.

    Args:
        model: Trust model for one app.
    """
    header = Text.assemble(
        ("App: ", "bold"), (model.display_name, ""),
        ("  Id: ", "bold"), (model.app_id or "-", "dim"),
        ("  Version: ", "bold"), (model.version or "-", "dim"),
    )
    console.print(Panel(header, title="Trust Score"))
    console.print(f"  Score:       [bold]{model.trust.score}[/bold]")
    console.print("  Risk:       ", _risk_text(model.trust.risk_level))
    console.print(f"  Confinement: {model.confinement.value}")
    console.print("  Maintainer: ", Text(model.maintainer.name or "(none)"))
    age = model.update_info.age_months
    console.print(f"  Updated:     {'unknown' if age is None else f'{age} month(s) ago'}")

    if model.signals:
        sig_table = Table(title="Signal Breakdown", show_header=True)
        sig_table.add_column("Signal", style="bold")
        sig_table.add_column("Penalty", justify="right")
        for signal in sorted(model.signals, key=lambda s: s.value):
            sig_table.add_row(signal.value, str(penalty_for(signal)))
        console.print(sig_table)

    if model.explanations:
        for sentence in model.explanations:
            console.print(f"  - {sentence}")
    else:
        console.print("[green]No trust concerns found.[/green]")

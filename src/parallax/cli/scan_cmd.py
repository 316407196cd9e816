"""``parallax scan`` -- Evaluate every installed click application.

Scans the click install root, builds a trust model for each app, and
prints a risk-colored table or a JSON array.

Exit Codes:
    0 -- At least one app was evaluated.
    2 -- No apps were found under the install root.
"""

from __future__ import annotations

import json
import sys

import click

from parallax.core import AppTrustModel, RiskLevel, scan_and_evaluate
from parallax.discovery import CLICK_APP_DIR


def sort_models(models: list[AppTrustModel], sort_key: str) -> list[AppTrustModel]:
    """Order models for display.

    ``score`` puts the least trusted apps first; ties break on name.
    ``name`` sorts case-insensitively by display name, then identifier.
    """
    if sort_key == "score":
        return sorted(models, key=lambda m: (m.trust.score, m.display_name.lower(), m.app_id))
    return sorted(models, key=lambda m: (m.display_name.lower(), m.app_id))


def filter_models(models: list[AppTrustModel], risk: str | None) -> list[AppTrustModel]:
    """Keep only models at the given risk level (all when ``risk`` is None)."""
    if risk is None:
        return models
    level = RiskLevel(risk)
    return [m for m in models if m.trust.risk_level is level]


@click.command("scan")
@click.option(
    "--root",
    type=click.Path(file_okay=False),
    envvar="PARALLAX_CLICK_ROOT",
    default=str(CLICK_APP_DIR),
    show_default=True,
    help="Click install root (or set PARALLAX_CLICK_ROOT).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--sort", "sort_key",
    type=click.Choice(["score", "name"]),
    default="score",
    help="Sort by lowest score first (default) or by name.",
)
@click.option(
    "--risk",
    type=click.Choice(["low", "medium", "high"]),
    default=None,
    help="Only show apps at this risk level.",
)
def scan_command(root: str, output_format: str, sort_key: str, risk: str | None) -> None:
    """Scan installed apps and compute a trust score for each.

    Exit code 0 if any app was evaluated, 2 if none were found.
    """
    models = scan_and_evaluate(root)

    if not models:
        if output_format == "json":
            click.echo(json.dumps([]))
        else:
            click.echo(f"No installed apps found under: {root}")
        sys.exit(2)

    models = filter_models(sort_models(models, sort_key), risk)

    if output_format == "json":
        click.echo(json.dumps([m.to_dict() for m in models], indent=2))
    else:
        from parallax.cli.output import print_scan_results
        print_scan_results(models)

    sys.exit(0)

"""``parallax inspect <app-dir>`` -- Trust breakdown for one application.

Reads a single click app directory (a package's ``current`` directory),
builds its trust model, and prints the score, risk tier, per-signal
penalties, and explanations.

Exit Codes:
    0 -- Trust model computed and displayed.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from parallax.core import build_trust_model, penalty_for
from parallax.discovery import ClickAppScanner


@click.command("inspect")
@click.argument("app_dir", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def inspect_command(app_dir: str, output_format: str) -> None:
    """Compute and display the trust score for a single app directory.

    APP_DIR is the directory holding the app's manifest.json, for example
    /opt/click.ubuntu.com/com.example.app/current.
    """
    fact = ClickAppScanner().read_app_metadata(Path(app_dir))
    model = build_trust_model(fact)

    if output_format == "json":
        data = model.to_dict()
        data["penalties"] = {
            signal.value: penalty_for(signal)
            for signal in sorted(model.signals, key=lambda s: s.value)
        }
        click.echo(json.dumps(data, indent=2))
    else:
        from parallax.cli.output import print_trust_model
        print_trust_model(model)

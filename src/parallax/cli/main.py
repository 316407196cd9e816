"""Parallax CLI -- Trust scores for installed click applications.

Entry point for the ``parallax`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan     -- Evaluate every installed app.
    inspect  -- Detailed trust breakdown for one app directory.
    signals  -- List the trust signal taxonomy.

Usage::

    parallax scan
    parallax scan --root ./fake-click-root --format json
    parallax scan --risk high
    parallax inspect /opt/click.ubuntu.com/com.example.app/current
    parallax signals
"""

from __future__ import annotations

import logging

import click

from parallax import __version__
from parallax.cli.inspect_cmd import inspect_command
from parallax.cli.scan_cmd import scan_command
from parallax.cli.signals_cmd import signals_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Parallax: Trust scores for installed click applications.

    Scores each app from its declared permissions, sandbox strength,
    update freshness, and maintainer presence, and explains every
    deduction in plain language.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(inspect_command)
cli.add_command(signals_command)

"""``parallax signals`` -- List the trust signal taxonomy.

Prints every signal with its score penalty and the explanation shown to
users, in taxonomy order.

Exit Codes:
    0 -- Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from parallax import __version__
from parallax.core import EXPLANATIONS, PENALTIES, Signal
from parallax.core.engine import BASE_SCORE

# Column widths for alignment
_W_SIG = 18
_W_PEN = 7

_ROW_FMT = "{sig:<{ws}}  {pen:>{wp}}  {exp}"


def _format_row(sig: str, pen: str, exp: str) -> str:
    """Render a single table row, right-stripped for clean output."""
    return _ROW_FMT.format(sig=sig, pen=pen, exp=exp, ws=_W_SIG, wp=_W_PEN).rstrip()


def format_signals_table() -> str:
    """Build the complete signal table as a plain string.

    Returns:
        Multi-line string ready for terminal output.  Never raises.
    """
    lines: list[str] = []
    lines.append(
        f"Parallax v{__version__} -- {len(Signal)} Trust Signals "
        f"(base score {BASE_SCORE})"
    )
    lines.append("")
    lines.append(_format_row("Signal", "Penalty", "Explanation"))
    lines.append(_format_row("-" * _W_SIG, "-" * _W_PEN, "-" * 11))

    for signal in Signal:
        lines.append(
            _format_row(signal.value, str(PENALTIES[signal]), EXPLANATIONS[signal])
        )

    return "\n".join(lines)


@click.command("signals")
def signals_command() -> None:
    """List every trust signal with its penalty and explanation."""
    click.echo(format_signals_table())

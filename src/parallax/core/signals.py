"""Signal derivation: map normalized facts to active trust signals.

Each rule is independent and additive:

- Every granted permission activates its ``USES_*`` signal.
- Weak confinement activates ``WEAK_CONFINEMENT``; medium confinement
  activates ``MEDIUM_CONFINEMENT``. Never both.
- A stale update activates ``STALE_APP``.
- An absent maintainer activates ``MISSING_MAINTAINER``.

Missing data activates nothing except ``MISSING_MAINTAINER``: an unknown
update age is not penalized.
"""

from __future__ import annotations

from .models import Maintainer, Permissions, RawAppFact, UpdateInfo
from .taxonomy import PERMISSION_SIGNALS, Confinement, Signal

_CONFINEMENT_SIGNALS: dict[Confinement, Signal] = {
    Confinement.WEAK: Signal.WEAK_CONFINEMENT,
    Confinement.MEDIUM: Signal.MEDIUM_CONFINEMENT,
}


def permission_signals(permissions: Permissions) -> set[Signal]:
    """Return the ``USES_*`` signals for every granted permission."""
    granted = permissions.as_dict()
    return {
        signal for name, signal in PERMISSION_SIGNALS.items()
        if granted.get(name)
    }


def confinement_signal(label: object) -> Signal | None:
    """Return the confinement signal for a label, or None for strict/unknown."""
    return _CONFINEMENT_SIGNALS.get(Confinement.parse(label))


def derive_signals(
    fact: RawAppFact,
    update_info: UpdateInfo,
    maintainer: Maintainer,
) -> frozenset[Signal]:
    """Derive the active trust signals for one application.

    Staleness and maintainer presence are read from the *normalized*
    records only; the raw timestamp and name on ``fact`` are ignored.

    Args:
        fact: Raw facts supplying permissions and the confinement label.
        update_info: Normalized update freshness for the same app.
        maintainer: Normalized maintainer for the same app.

    Returns:
        Frozen set of active signals.
    """
    signals = permission_signals(Permissions.from_mapping(fact.permissions))

    confinement = confinement_signal(fact.confinement)
    if confinement is not None:
        signals.add(confinement)

    if update_info.is_stale:
        signals.add(Signal.STALE_APP)

    if not maintainer.present:
        signals.add(Signal.MISSING_MAINTAINER)

    return frozenset(signals)
